from .builder import DiagnosticBuilder, build_diagnostic
from .errors import InvalidArgumentError, require_present
from .loader import (
    load_wire_diagnostics,
    load_wire_diagnostics_from_json_text,
    load_wire_diagnostics_from_text,
)
from .models import DIAGNOSTIC_FIELDS, Diagnostic
from .serialize import (
    canonical_diagnostic_json,
    diagnostic_from_wire,
    diagnostic_json,
    diagnostic_to_wire,
    diagnostics_from_wire,
    diagnostics_to_wire,
    hash_diagnostic,
)
from .sort import canonical_related_json, dedupe_diagnostics, diagnostic_sort_key, sort_diagnostics

__all__ = [
    "DIAGNOSTIC_FIELDS",
    "Diagnostic",
    "DiagnosticBuilder",
    "InvalidArgumentError",
    "build_diagnostic",
    "canonical_diagnostic_json",
    "canonical_related_json",
    "dedupe_diagnostics",
    "diagnostic_from_wire",
    "diagnostic_json",
    "diagnostic_sort_key",
    "diagnostic_to_wire",
    "diagnostics_from_wire",
    "diagnostics_to_wire",
    "hash_diagnostic",
    "load_wire_diagnostics",
    "load_wire_diagnostics_from_json_text",
    "load_wire_diagnostics_from_text",
    "require_present",
    "sort_diagnostics",
]

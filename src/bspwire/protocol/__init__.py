from .models import (
    WIRE_MODEL_CONFIG,
    DiagnosticRelatedInformation,
    DiagnosticSeverity,
    Location,
    Position,
    Range,
)

__all__ = [
    "DiagnosticRelatedInformation",
    "DiagnosticSeverity",
    "Location",
    "Position",
    "Range",
    "WIRE_MODEL_CONFIG",
]

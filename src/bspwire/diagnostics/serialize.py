from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping

from .models import Diagnostic


def diagnostic_to_wire(diagnostic: Diagnostic) -> dict[str, object]:
    return diagnostic.model_dump(mode="json", by_alias=True, exclude_none=True)


def diagnostic_from_wire(payload: Mapping[str, object]) -> Diagnostic:
    return Diagnostic.model_validate(payload)


def diagnostics_to_wire(diagnostics: Iterable[Diagnostic]) -> list[dict[str, object]]:
    return [diagnostic_to_wire(diagnostic) for diagnostic in diagnostics]


def diagnostics_from_wire(payloads: Iterable[Mapping[str, object]]) -> tuple[Diagnostic, ...]:
    return tuple(diagnostic_from_wire(payload) for payload in payloads)


def diagnostic_json(diagnostic: Diagnostic) -> str:
    return diagnostic.model_dump_json(by_alias=True, exclude_none=True)


def canonical_diagnostic_json(diagnostic: Diagnostic) -> str:
    return json.dumps(
        diagnostic_to_wire(diagnostic),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )


def hash_diagnostic(diagnostic: Diagnostic, algo: str = "sha256") -> str:
    hasher = hashlib.new(algo)
    hasher.update(canonical_diagnostic_json(diagnostic).encode("utf-8"))
    return hasher.hexdigest()

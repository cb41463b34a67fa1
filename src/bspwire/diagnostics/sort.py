from __future__ import annotations

import json
from collections.abc import Iterable

from bspwire.protocol import DiagnosticRelatedInformation, DiagnosticSeverity

from .models import Diagnostic

_SEVERITY_RANK: dict[DiagnosticSeverity, int] = {
    DiagnosticSeverity.ERROR: 0,
    DiagnosticSeverity.WARNING: 1,
    DiagnosticSeverity.INFORMATION: 2,
    DiagnosticSeverity.HINT: 3,
}
_SEVERITY_UNSET_RANK = len(_SEVERITY_RANK)


def canonical_related_json(related_information: DiagnosticRelatedInformation | None) -> str:
    if related_information is None:
        return ""
    return json.dumps(
        related_information.model_dump(mode="json", by_alias=True),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
    )


def _optional_text_sort_key(value: str | None) -> tuple[int, str]:
    if value is None:
        return (1, "")
    return (0, value)


def _severity_sort_key(severity: DiagnosticSeverity | None) -> int:
    if severity is None:
        return _SEVERITY_UNSET_RANK
    return _SEVERITY_RANK[severity]


def diagnostic_sort_key(
    diagnostic: Diagnostic,
) -> tuple[int, int, int, int, int, tuple[int, str], tuple[int, str], str, str]:
    start = diagnostic.range.start
    end = diagnostic.range.end
    return (
        start.line,
        start.character,
        end.line,
        end.character,
        _severity_sort_key(diagnostic.severity),
        _optional_text_sort_key(diagnostic.code),
        _optional_text_sort_key(diagnostic.source),
        diagnostic.message,
        canonical_related_json(diagnostic.related_information),
    )


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(diagnostics, key=diagnostic_sort_key)


def dedupe_diagnostics(diagnostics: Iterable[Diagnostic]) -> tuple[Diagnostic, ...]:
    """Drop diagnostics equal to an earlier one, keeping first-seen order."""
    seen: set[Diagnostic] = set()
    unique: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if diagnostic in seen:
            continue
        seen.add(diagnostic)
        unique.append(diagnostic)
    return tuple(unique)

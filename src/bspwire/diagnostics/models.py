from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel

from bspwire.protocol import (
    WIRE_MODEL_CONFIG,
    DiagnosticRelatedInformation,
    DiagnosticSeverity,
    Range,
)

DIAGNOSTIC_FIELDS: tuple[str, ...] = (
    "range",
    "severity",
    "code",
    "source",
    "message",
    "related_information",
)


class Diagnostic(BaseModel):
    """A problem reported by a build tool, attached to a source range.

    ``range`` and ``message`` are always present. Every other field may be
    ``None``, which means absent; absence is never equal to a present value,
    including an empty string.

    Instances are frozen. Use :class:`~bspwire.diagnostics.builder.DiagnosticBuilder`
    to assemble one field at a time, or ``DiagnosticBuilder.from_diagnostic`` to
    derive a changed copy. ``model_copy(update=...)`` revalidates the merged
    fields; ``model_construct`` skips validation and is not supported.
    """

    model_config = WIRE_MODEL_CONFIG

    range: Range
    severity: DiagnosticSeverity | None = None
    code: str | None = None
    source: str | None = None
    message: str
    related_information: DiagnosticRelatedInformation | None = None

    def field_values(self) -> tuple[object, ...]:
        # equality and hashing both read exactly this tuple
        return tuple(getattr(self, name) for name in DIAGNOSTIC_FIELDS)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.field_values() == cast(Diagnostic, other).field_values()

    def __hash__(self) -> int:
        return hash(self.field_values())

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> Diagnostic:
        if not update:
            return super().model_copy(deep=deep)
        values = {name: getattr(self, name) for name in DIAGNOSTIC_FIELDS}
        values.update(update)
        return type(self).model_validate(values)

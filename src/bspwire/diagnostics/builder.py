from __future__ import annotations

from bspwire.protocol import DiagnosticRelatedInformation, DiagnosticSeverity, Range

from .errors import require_present
from .models import Diagnostic


class DiagnosticBuilder:
    """Mutable staging area for a :class:`Diagnostic`.

    The two required fields are checked on every write, so a builder can
    never hold an absent ``range`` or ``message``. Optional fields accept
    ``None`` to clear them. Type checks on the optional fields happen in
    :meth:`build`.

    A builder belongs to the code that created it until :meth:`build` is
    called; it is not safe to share across threads.
    """

    __slots__ = ("_code", "_message", "_range", "_related_information", "_severity", "_source")

    def __init__(self, diagnostic_range: Range, message: str) -> None:
        self._range = require_present(diagnostic_range, "range")
        self._message = require_present(message, "message")
        self._severity: DiagnosticSeverity | None = None
        self._code: str | None = None
        self._source: str | None = None
        self._related_information: DiagnosticRelatedInformation | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> DiagnosticBuilder:
        builder = cls(diagnostic.range, diagnostic.message)
        builder._severity = diagnostic.severity
        builder._code = diagnostic.code
        builder._source = diagnostic.source
        builder._related_information = diagnostic.related_information
        return builder

    def set_range(self, diagnostic_range: Range) -> DiagnosticBuilder:
        self._range = require_present(diagnostic_range, "range")
        return self

    def set_message(self, message: str) -> DiagnosticBuilder:
        self._message = require_present(message, "message")
        return self

    def set_severity(self, severity: DiagnosticSeverity | None) -> DiagnosticBuilder:
        self._severity = severity
        return self

    def set_code(self, code: str | None) -> DiagnosticBuilder:
        self._code = code
        return self

    def set_source(self, source: str | None) -> DiagnosticBuilder:
        self._source = source
        return self

    def set_related_information(
        self, related_information: DiagnosticRelatedInformation | None
    ) -> DiagnosticBuilder:
        self._related_information = related_information
        return self

    def build(self) -> Diagnostic:
        return Diagnostic(
            range=self._range,
            severity=self._severity,
            code=self._code,
            source=self._source,
            message=self._message,
            related_information=self._related_information,
        )


def build_diagnostic(  # noqa: PLR0913
    diagnostic_range: Range,
    message: str,
    *,
    severity: DiagnosticSeverity | None = None,
    code: str | None = None,
    source: str | None = None,
    related_information: DiagnosticRelatedInformation | None = None,
) -> Diagnostic:
    return (
        DiagnosticBuilder(diagnostic_range, message)
        .set_severity(severity)
        .set_code(code)
        .set_source(source)
        .set_related_information(related_information)
        .build()
    )

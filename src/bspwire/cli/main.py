from __future__ import annotations

import json
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Final

import typer

from bspwire.diagnostics import (
    Diagnostic,
    dedupe_diagnostics,
    diagnostics_to_wire,
    hash_diagnostic,
    load_wire_diagnostics,
    sort_diagnostics,
)
from bspwire.protocol import DiagnosticSeverity, Range

app = typer.Typer(help="Build Server Protocol diagnostic payload tools")

_CHECK_OUTPUT_SCHEMA_VERSION: Final[int] = 1
_EXIT_OK: Final[int] = 0
_EXIT_ERROR_DIAGNOSTICS: Final[int] = 1
_EXIT_INVALID: Final[int] = 2


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


_FORMAT_OPTION = typer.Option(
    OutputFormat.TEXT,
    "--format",
    help="Check output format: text|json",
    show_default=True,
)
_DEDUPE_OPTION = typer.Option(
    False,
    "--dedupe",
    help="Drop diagnostics equal to an earlier one before printing",
)


def _execute_load(payload: Path) -> tuple[Diagnostic, ...]:
    return load_wire_diagnostics(payload)


@app.command()
def check(
    payload: Path,
    output_format: OutputFormat = _FORMAT_OPTION,
    dedupe: bool = _DEDUPE_OPTION,
) -> None:
    """Validate a JSON/YAML file of diagnostic wire payloads."""
    try:
        loaded = _execute_load(payload)
    except ValueError as exc:
        _emit_invalid_output(payload=payload, exc=exc, output_format=output_format)
        raise typer.Exit(code=_EXIT_INVALID) from exc

    if dedupe:
        loaded = dedupe_diagnostics(loaded)
    diagnostics = tuple(sort_diagnostics(loaded))
    _emit_check_output(payload=payload, diagnostics=diagnostics, output_format=output_format)
    raise typer.Exit(code=_derive_check_exit_code(diagnostics))


@app.command()
def fingerprint(payload: Path) -> None:
    """Print a stable content hash for each diagnostic in a payload file."""
    try:
        loaded = _execute_load(payload)
    except ValueError as exc:
        typer.echo(f"invalid payload: {_exception_message(exc)}")
        raise typer.Exit(code=_EXIT_INVALID) from exc

    for diagnostic in sort_diagnostics(loaded):
        typer.echo(f"{hash_diagnostic(diagnostic)} {_single_line(diagnostic.message)}")


def _has_error_diagnostics(diagnostics: Sequence[Diagnostic]) -> bool:
    return any(diagnostic.severity is DiagnosticSeverity.ERROR for diagnostic in diagnostics)


def _derive_check_exit_code(diagnostics: Sequence[Diagnostic]) -> int:
    if _has_error_diagnostics(diagnostics):
        return _EXIT_ERROR_DIAGNOSTICS
    return _EXIT_OK


def _emit_check_output(
    *,
    payload: Path,
    diagnostics: Sequence[Diagnostic],
    output_format: OutputFormat,
) -> None:
    if output_format is OutputFormat.JSON:
        typer.echo(_build_check_json_output(payload=payload, diagnostics=diagnostics))
        return
    _print_diagnostics(diagnostics)


def _emit_invalid_output(*, payload: Path, exc: Exception, output_format: OutputFormat) -> None:
    if output_format is OutputFormat.JSON:
        document: dict[str, object] = {
            "schema_version": _CHECK_OUTPUT_SCHEMA_VERSION,
            "payload": payload.as_posix(),
            "status": "invalid",
            "exit_code": _EXIT_INVALID,
            "error": _exception_message(exc),
        }
        typer.echo(json.dumps(document, ensure_ascii=True, separators=(",", ":")))
        return
    typer.echo(f"invalid payload: {_exception_message(exc)}")


def _build_check_json_output(*, payload: Path, diagnostics: Sequence[Diagnostic]) -> str:
    document: dict[str, object] = {
        "schema_version": _CHECK_OUTPUT_SCHEMA_VERSION,
        "payload": payload.as_posix(),
        "status": "fail" if _has_error_diagnostics(diagnostics) else "pass",
        "exit_code": _derive_check_exit_code(diagnostics),
        "diagnostics": diagnostics_to_wire(diagnostics),
    }
    return json.dumps(document, ensure_ascii=True, separators=(",", ":"))


def _exception_message(exc: Exception) -> str:
    message = _single_line(str(exc))
    if message:
        return message
    return type(exc).__name__


def _print_diagnostics(diagnostics: Sequence[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        typer.echo(
            "DIAG"
            f" severity={_format_severity(diagnostic.severity)}"
            f" range={_format_range(diagnostic.range)}"
            f" code={_format_optional(diagnostic.code)}"
            f" source={_format_optional(diagnostic.source)}"
            f" message={_single_line(diagnostic.message)}"
        )


def _format_optional(value: str | None) -> str:
    if value is None:
        return "-"
    return _single_line(value)


def _single_line(text: str) -> str:
    # one DIAG record per output line
    return " ".join(text.split())


def _format_severity(severity: DiagnosticSeverity | None) -> str:
    if severity is None:
        return "unset"
    return severity.name.lower()


def _format_range(diagnostic_range: Range) -> str:
    start = diagnostic_range.start
    end = diagnostic_range.end
    return f"{start.line}:{start.character}-{end.line}:{end.character}"


def main() -> None:
    app()

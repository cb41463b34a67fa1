from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from bspwire.diagnostics import (
    build_diagnostic,
    load_wire_diagnostics,
    load_wire_diagnostics_from_json_text,
    load_wire_diagnostics_from_text,
)
from bspwire.protocol import DiagnosticSeverity, Range

pytestmark = pytest.mark.unit

_ENTRY: dict[str, object] = {
    "range": {"start": {"line": 0, "character": 0}, "end": {"line": 0, "character": 5}},
    "severity": 1,
    "code": "E001",
    "message": "unexpected token",
}
_EXPECTED = build_diagnostic(
    Range.of(0, 0, 0, 5), "unexpected token", severity=DiagnosticSeverity.ERROR, code="E001"
)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_single_diagnostic_object(tmp_path: Path) -> None:
    path = _write(tmp_path, "one.json", json.dumps(_ENTRY))
    assert load_wire_diagnostics(path) == (_EXPECTED,)


def test_loads_list_of_diagnostics(tmp_path: Path) -> None:
    second = {**_ENTRY, "message": "second"}
    path = _write(tmp_path, "many.json", json.dumps([_ENTRY, second]))

    loaded = load_wire_diagnostics(path)

    assert [diagnostic.message for diagnostic in loaded] == ["unexpected token", "second"]


def test_loads_publish_diagnostics_params_block(tmp_path: Path) -> None:
    params = {
        "textDocument": {"uri": "file:///workspace/src/Main.scala"},
        "buildTarget": {"uri": "file:///workspace/?id=root"},
        "diagnostics": [_ENTRY],
        "reset": True,
    }
    path = _write(tmp_path, "publish.json", json.dumps(params))

    assert load_wire_diagnostics(path) == (_EXPECTED,)


def test_loads_yaml_payload(tmp_path: Path) -> None:
    text = "\n".join(
        [
            "diagnostics:",
            "  - range:",
            "      start: {line: 0, character: 0}",
            "      end: {line: 0, character: 5}",
            "    severity: 1",
            "    code: E001",
            "    message: unexpected token",
        ]
    )
    path = _write(tmp_path, "payload.yaml", text)

    assert load_wire_diagnostics(path) == (_EXPECTED,)


def test_empty_list_loads_no_diagnostics() -> None:
    assert load_wire_diagnostics_from_text(source="inline", payload_text="[]") == ()


def test_missing_file_is_reported_with_path(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="diagnostic payload is missing"):
        load_wire_diagnostics(tmp_path / "absent.json")


def test_directory_payload_is_reported_as_unreadable(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="diagnostic payload is unreadable") as exc_info:
        load_wire_diagnostics(tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_tab_indented_json_file_loads(tmp_path: Path) -> None:
    path = _write(tmp_path, "tabs.json", json.dumps({"diagnostics": [_ENTRY]}, indent="\t"))

    assert load_wire_diagnostics(path) == (_EXPECTED,)


def test_json_suffix_is_matched_case_insensitively(tmp_path: Path) -> None:
    path = _write(tmp_path, "TABS.JSON", json.dumps([_ENTRY], indent="\t"))

    assert load_wire_diagnostics(path) == (_EXPECTED,)


def test_invalid_json_file_is_reported_with_path(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.json", '{"diagnostics": [')

    with pytest.raises(ValueError, match=r"invalid JSON payload: .*broken\.json"):
        load_wire_diagnostics(path)


def test_json_text_shape_errors_match_yaml_text() -> None:
    expected = "payload must be a diagnostic mapping or a list of them"
    with pytest.raises(ValueError, match=expected):
        load_wire_diagnostics_from_json_text(source="inline", payload_text="42")


def test_unparseable_text_is_reported_with_source() -> None:
    with pytest.raises(ValueError, match="invalid JSON/YAML payload: inline"):
        load_wire_diagnostics_from_text(source="inline", payload_text="{")


@pytest.mark.parametrize(
    ("payload_text", "expected"),
    [
        ("", "payload must be a diagnostic mapping or a list of them"),
        ("42", "payload must be a diagnostic mapping or a list of them"),
        ('["not a mapping"]', "diagnostic entry 0 must be a mapping"),
        ('{"diagnostics": {"message": "m"}}', "'diagnostics' must be a list"),
    ],
)
def test_wrongly_shaped_documents_are_rejected(payload_text: str, expected: str) -> None:
    with pytest.raises(ValueError, match=expected):
        load_wire_diagnostics_from_text(source="inline", payload_text=payload_text)


def test_invalid_entry_raises_validation_error() -> None:
    payload_text = json.dumps([_ENTRY, {"range": _ENTRY["range"]}])

    with pytest.raises(ValidationError):
        load_wire_diagnostics_from_text(source="inline", payload_text=payload_text)

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

import yaml  # type: ignore[import-untyped]

from .models import Diagnostic
from .serialize import diagnostics_from_wire

_DIAGNOSTICS_KEY = "diagnostics"
_JSON_SUFFIX = ".json"


def load_wire_diagnostics(path: Path) -> tuple[Diagnostic, ...]:
    try:
        payload_text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"diagnostic payload is missing: {path.as_posix()}") from exc
    except OSError as exc:
        raise ValueError(f"diagnostic payload is unreadable: {path.as_posix()}: {exc}") from exc
    if path.suffix.lower() == _JSON_SUFFIX:
        return load_wire_diagnostics_from_json_text(
            source=path.as_posix(), payload_text=payload_text
        )
    return load_wire_diagnostics_from_text(source=path.as_posix(), payload_text=payload_text)


def load_wire_diagnostics_from_json_text(
    *, source: str, payload_text: str
) -> tuple[Diagnostic, ...]:
    # strict JSON allows tab indentation, which YAML does not
    try:
        payload = json.loads(payload_text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON payload: {source}: {exc}") from exc
    return diagnostics_from_wire(_wire_entries(source=source, payload=payload))


def load_wire_diagnostics_from_text(*, source: str, payload_text: str) -> tuple[Diagnostic, ...]:
    try:
        payload = yaml.safe_load(payload_text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid JSON/YAML payload: {source}: {exc}") from exc
    return diagnostics_from_wire(_wire_entries(source=source, payload=payload))


def _wire_entries(*, source: str, payload: object) -> list[dict[str, object]]:
    if isinstance(payload, dict) and _DIAGNOSTICS_KEY in payload:
        payload = payload[_DIAGNOSTICS_KEY]
        if not isinstance(payload, list):
            raise ValueError(f"'{_DIAGNOSTICS_KEY}' must be a list: {source}")
    if isinstance(payload, dict):
        return [cast(dict[str, object], payload)]
    if isinstance(payload, list):
        entries = cast(list[object], payload)
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"diagnostic entry {index} must be a mapping: {source}")
        return cast(list[dict[str, object]], entries)
    raise ValueError(f"payload must be a diagnostic mapping or a list of them: {source}")

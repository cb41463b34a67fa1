from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WIRE_MODEL_CONFIG = ConfigDict(
    extra="forbid",
    frozen=True,
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
)


class DiagnosticSeverity(IntEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class Position(BaseModel):
    """Zero-based line/character offset into a text document."""

    model_config = WIRE_MODEL_CONFIG

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(BaseModel):
    """Source span between two positions; ``end`` is exclusive.

    Position ordering is not checked, matching the protocol, so a reversed
    range decodes as sent.
    """

    model_config = WIRE_MODEL_CONFIG

    start: Position
    end: Position

    @classmethod
    def of(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )


class Location(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    uri: str = Field(min_length=1)
    range: Range


class DiagnosticRelatedInformation(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    location: Location
    message: str

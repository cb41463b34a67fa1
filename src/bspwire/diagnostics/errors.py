from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class InvalidArgumentError(ValueError):
    """Raised when a required diagnostic field would be left absent."""

    def __init__(self, field_name: str) -> None:
        if not field_name:
            raise ValueError("field_name must be non-empty")
        super().__init__(f"{field_name} must not be None")
        self.field_name = field_name


def require_present(value: T | None, field_name: str) -> T:
    if value is None:
        raise InvalidArgumentError(field_name)
    return value

"""Exception types raised while converting enum values to and from their encodings."""

from __future__ import annotations

import json
from collections.abc import Iterable

__all__ = [
    "EnumError",
    "InvalidEnumValueError",
    "BinaryDataTooShortError",
    "BinaryDataTruncatedError",
    "LabelTooLongError",
]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class EnumError(Exception):
    """Base class for every error raised by this package."""


class InvalidEnumValueError(EnumError, ValueError):
    """A label that does not belong to the enum was encountered."""

    def __init__(self, value: str, valid_values: Iterable[str]) -> None:
        self.value = value
        self.valid_values = list(valid_values)
        if self.valid_values:
            detail = f"valid values: [{' '.join(self.valid_values)}]"
        else:
            detail = "no valid values available"
        super().__init__(f"invalid enum value: {_quote(value)} ({detail})")


class BinaryDataTooShortError(EnumError, ValueError):
    """Binary data is too short to hold even the length prefix."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"binary data too short: expected at least {expected} bytes, got {actual}"
        )


class BinaryDataTruncatedError(EnumError, ValueError):
    """Binary data ends before the length its prefix announces."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"binary data truncated: expected {expected} bytes, got {actual}")


class LabelTooLongError(EnumError, ValueError):
    """A label is longer than the binary encoding can represent."""

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(f"label too long: {length} bytes (max {max_length})")
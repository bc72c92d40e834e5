"""Encoding of enum values as JSON, YAML, text, binary and SQL values."""

from __future__ import annotations

import json
import struct
from collections.abc import Callable, Sequence
from typing import Any

from .errors import BinaryDataTooShortError, BinaryDataTruncatedError, InvalidEnumValueError, LabelTooLongError
from .lookup import string_to_index
from .validation import INVALID_LABEL, is_valid_index, safe_get_label

__all__ = [
    "MAX_BINARY_LABEL_LENGTH",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
    "to_text",
    "from_text",
    "to_binary",
    "from_binary",
    "to_sql_value",
    "from_sql_value",
]

MAX_BINARY_LABEL_LENGTH = 0xFFFF

_LENGTH_PREFIX = struct.Struct(">H")

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _resolve(labels: Sequence[str], label: str) -> int:
    index = string_to_index(labels, label)
    if index is None:
        raise InvalidEnumValueError(label, labels)
    return index


def _decode(data: bytes | bytearray | memoryview | str) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="surrogateescape")


def to_json(labels: Sequence[str], value: int) -> str:
    """Return the JSON string literal for ``value``; out-of-range values give "Invalid"."""
    label = safe_get_label(labels, value, INVALID_LABEL)
    return json.dumps(label, ensure_ascii=False).translate(_JSON_ESCAPES)


def from_json(labels: Sequence[str], data: str | bytes | bytearray) -> int:
    """Decode a JSON string literal into the enum value it names.

    Raises ValueError for malformed JSON or a non-string document, and
    InvalidEnumValueError for an unknown label.
    """
    decoded = json.loads(data)
    if decoded is None:
        decoded = ""
    elif not isinstance(decoded, str):
        raise ValueError(
            f"json: cannot unmarshal {type(decoded).__name__} into a string enum value"
        )
    return _resolve(labels, decoded)


def to_yaml(labels: Sequence[str], value: int) -> str:
    """Return the YAML scalar for ``value``; out-of-range values give "Invalid"."""
    return safe_get_label(labels, value, INVALID_LABEL)


def from_yaml(labels: Sequence[str], unmarshal: Callable[[type], Any]) -> int:
    """Decode a YAML node into the enum value it names.

    ``unmarshal`` is called with ``str`` and must return the node decoded as a
    string, raising if it cannot. Its errors propagate unchanged.
    """
    decoded = unmarshal(str)
    if not isinstance(decoded, str):
        raise TypeError(
            f"cannot decode {type(decoded).__name__} as a string enum value"
        )
    return _resolve(labels, decoded)


def to_text(labels: Sequence[str], value: int) -> bytes:
    """Return the UTF-8 text of the label for ``value``."""
    return safe_get_label(labels, value, INVALID_LABEL).encode("utf-8", errors="surrogateescape")


def from_text(labels: Sequence[str], text: bytes | bytearray | str) -> int:
    """Decode a label given as text into its enum value."""
    return _resolve(labels, _decode(text))


def to_binary(labels: Sequence[str], value: int) -> bytes:
    """Return the label as a big-endian 2-byte length prefix followed by UTF-8 bytes."""
    encoded = to_text(labels, value)
    if len(encoded) > MAX_BINARY_LABEL_LENGTH:
        raise LabelTooLongError(len(encoded), MAX_BINARY_LABEL_LENGTH)
    return _LENGTH_PREFIX.pack(len(encoded)) + encoded


def from_binary(labels: Sequence[str], data: bytes | bytearray | memoryview) -> int:
    """Decode length-prefixed binary data into its enum value.

    Bytes after the announced length are ignored.
    """
    data = bytes(data)
    prefix_size = _LENGTH_PREFIX.size
    if len(data) < prefix_size:
        raise BinaryDataTooShortError(prefix_size, len(data))
    (length,) = _LENGTH_PREFIX.unpack_from(data)
    end = prefix_size + length
    if len(data) < end:
        raise BinaryDataTruncatedError(end, len(data))
    return _resolve(labels, _decode(data[prefix_size:end]))


def to_sql_value(labels: Sequence[str], value: int) -> str:
    """Return the label to store in SQL; out-of-range values raise InvalidEnumValueError."""
    if not is_valid_index(labels, value):
        raise InvalidEnumValueError("", labels)
    return labels[int(value)]


def from_sql_value(labels: Sequence[str], src: Any) -> int:
    """Decode an SQL column value into its enum value; NULL maps to 0."""
    if src is None:
        return 0
    if isinstance(src, str):
        label = src
    elif isinstance(src, (bytes, bytearray, memoryview)):
        label = _decode(src)
    else:
        raise InvalidEnumValueError("non-string SQL value", labels)
    return _resolve(labels, label)
"""Bounds checks and safe label access for index-based enums."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "INVALID_LABEL",
    "validate_index",
    "is_valid_index",
    "safe_get_label",
    "get_label",
]

INVALID_LABEL = "Invalid"


def validate_index(labels: Sequence[str], index: int) -> None:
    """Raise IndexError if ``index`` is not a position in ``labels``."""
    if not is_valid_index(labels, index):
        raise IndexError(
            f"index {int(index)} out of bounds for enum with {len(labels)} labels"
        )


def is_valid_index(labels: Sequence[str], index: int) -> bool:
    """Return True when ``index`` lies within ``labels``."""
    return 0 <= int(index) < len(labels)


def safe_get_label(labels: Sequence[str], index: int, default: str) -> str:
    """Return the label at ``index`` or ``default`` when out of bounds."""
    if is_valid_index(labels, index):
        return labels[int(index)]
    return default


def get_label(labels: Sequence[str], index: int) -> str:
    """Return the label at ``index``, raising IndexError when out of bounds."""
    validate_index(labels, index)
    return labels[int(index)]
"""Label-to-index lookup, switching strategy with the size of the enum."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "DEFAULT_LOOKUP_THRESHOLD",
    "LOOKUP_THRESHOLD",
    "string_to_index",
    "map_lookup",
    "linear_lookup",
    "build_label_map",
]

DEFAULT_LOOKUP_THRESHOLD = 10
LOOKUP_THRESHOLD = DEFAULT_LOOKUP_THRESHOLD


def string_to_index(labels: Sequence[str], target: str) -> int | None:
    """Return the index of ``target`` in ``labels``, or None when absent.

    Enums above the threshold use a mapping, smaller ones a linear scan.
    """
    if len(labels) > LOOKUP_THRESHOLD:
        return map_lookup(labels, target)
    return linear_lookup(labels, target)


def map_lookup(labels: Sequence[str], target: str) -> int | None:
    """Look ``target`` up through a mapping; duplicates resolve to the last one."""
    return build_label_map(labels).get(target)


def linear_lookup(labels: Sequence[str], target: str) -> int | None:
    """Scan ``labels`` for ``target``; duplicates resolve to the first one."""
    return next((i for i, label in enumerate(labels) if label == target), None)


def build_label_map(labels: Sequence[str]) -> dict[str, int]:
    """Build a mapping from each label to its index."""
    return {label: i for i, label in enumerate(labels)}
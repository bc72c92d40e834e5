"""Precomputed lookup structures for an enum's labels."""

from __future__ import annotations

from collections.abc import Iterable

from .lookup import LOOKUP_THRESHOLD, build_label_map

__all__ = ["CacheBuilder"]


class CacheBuilder:
    """Builds the value list and label mapping that an enum keeps."""

    def __init__(self, labels: Iterable[str]) -> None:
        self.labels = list(labels)

    def build_all_values(self) -> list[int]:
        """Return every enum value, in label order."""
        return list(range(len(self.labels)))

    def build_lookup_map(self) -> dict[str, int]:
        """Return a mapping from label to value."""
        return build_label_map(self.labels)

    def should_use_cached_lookup(self) -> bool:
        """Return True when the enum is large enough to favour a mapping."""
        return len(self.labels) > LOOKUP_THRESHOLD
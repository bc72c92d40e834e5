"""An enumeration mapping consecutive integer values to string labels."""

from __future__ import annotations

from collections.abc import Iterator

from .cache import CacheBuilder
from .validation import safe_get_label

__all__ = ["Enum"]


class Enum:
    """Maps the values ``0 .. n-1`` to the labels given, in order."""

    __slots__ = ("_labels", "_lookup", "_values")

    def __init__(self, *args: str) -> None:
        self._labels: tuple[str, ...] = tuple(args)
        builder = CacheBuilder(self._labels)
        self._lookup = builder.build_lookup_map()
        self._values: tuple[int, ...] = tuple(builder.build_all_values())

    def name_of(self, value: int) -> str:
        """Return the label for ``value``, or ``Invalid(<value>)`` when out of range."""
        return safe_get_label(self._labels, value, f"Invalid({int(value)})")

    def from_string(self, text: str) -> int:
        """Return the value whose label is ``text``; raise ValueError if there is none."""
        try:
            return self._lookup[text]
        except KeyError:
            raise ValueError(f"invalid value: {text}") from None

    def all(self) -> list[int]:
        """Return a fresh list of every value."""
        return list(self._values)

    def labels(self) -> list[str]:
        """Return a fresh list of every label."""
        return list(self._labels)

    def labels_read_only(self) -> tuple[str, ...]:
        """Return the enum's own immutable sequence of labels, without copying."""
        return self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Enum({', '.join(repr(label) for label in self._labels)})"
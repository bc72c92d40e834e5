"""A current enum value bundled with its labels, with every encoding on hand."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from . import marshal
from .enum import Enum
from .errors import EnumError
from .registry import get_labels, register

__all__ = ["Wrapper", "new_wrapper"]


class Wrapper:
    """Holds a current value of ``kind`` together with the enum that names it.

    ``kind`` is an ``int`` type; decoded values are converted to it. When no
    enum is supplied, one is built on first use from ``labels`` or, failing
    that, from the labels registered for ``kind``.
    """

    def __init__(
        self,
        kind: type = int,
        labels: Sequence[str] | None = None,
        enum: Enum | None = None,
        current: int = 0,
    ) -> None:
        self.kind = kind
        self.enum = enum
        self.current = kind(current)
        self._labels = None if labels is None else list(labels)

    def __str__(self) -> str:
        return self._active_enum().name_of(self.current)

    def __repr__(self) -> str:
        return f"Wrapper(kind={getattr(self.kind, '__name__', self.kind)}, current={int(self.current)})"

    def all(self) -> list[int]:
        """Return every value of the enum."""
        return self._active_enum().all()

    def labels(self) -> list[str]:
        """Return a copy of every label of the enum."""
        return self._active_enum().labels()

    def ensure_enum(self) -> None:
        """Build the enum if missing, from local labels first, then the registry."""
        if self.enum is not None:
            return
        if self._labels is not None:
            self.enum = Enum(*self._labels)
        elif (registered := get_labels(self.kind)) is not None:
            self.enum = Enum(*registered)
            self._labels = registered

    def _active_enum(self) -> Enum:
        self.ensure_enum()
        if self.enum is None:
            name = getattr(self.kind, "__name__", repr(self.kind))
            raise EnumError(f"no labels known for {name}")
        return self.enum

    def _names(self) -> Sequence[str]:
        return self._active_enum().labels_read_only()

    def _store(self, value: int) -> None:
        self.current = self.kind(value)

    def to_json(self) -> str:
        """Return the current value as a JSON string literal."""
        return marshal.to_json(self._names(), self.current)

    def from_json(self, data: str | bytes | bytearray) -> None:
        """Set the current value from a JSON string literal."""
        self._store(marshal.from_json(self._names(), data))

    def to_yaml(self) -> str:
        """Return the current value as a YAML scalar."""
        return marshal.to_yaml(self._names(), self.current)

    def from_yaml(self, unmarshal: Callable[[type], Any]) -> None:
        """Set the current value from a YAML node decoded by ``unmarshal``."""
        self._store(marshal.from_yaml(self._names(), unmarshal))

    def to_text(self) -> bytes:
        """Return the current label as UTF-8 text."""
        return marshal.to_text(self._names(), self.current)

    def from_text(self, text: bytes | bytearray | str) -> None:
        """Set the current value from its label as text."""
        self._store(marshal.from_text(self._names(), text))

    def to_binary(self) -> bytes:
        """Return the current label with a big-endian 2-byte length prefix."""
        return marshal.to_binary(self._names(), self.current)

    def from_binary(self, data: bytes | bytearray | memoryview) -> None:
        """Set the current value from length-prefixed binary data."""
        self._store(marshal.from_binary(self._names(), data))

    def value(self) -> str:
        """Return the label to store in an SQL column."""
        return marshal.to_sql_value(self._names(), self.current)

    def scan(self, src: Any) -> None:
        """Set the current value from an SQL column value; NULL gives 0."""
        self._store(marshal.from_sql_value(self._names(), src))


def new_wrapper(kind: type, *args: str) -> Wrapper:
    """Register ``args`` as the labels of ``kind`` and return a wrapper at value 0."""
    register(kind, *args)
    return Wrapper(kind, labels=args, enum=Enum(*args))
"""A process-wide registry of the labels known for each enum kind."""

from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import Any

__all__ = ["register", "get_labels"]

_registry: dict[Hashable, tuple[str, ...]] = {}
_lock = threading.Lock()


def _key(kind: Any) -> Hashable:
    if isinstance(kind, str):
        return kind
    return getattr(kind, "__name__", kind)


def register(kind: Any, *args: str) -> None:
    """Record ``args`` as the labels of ``kind``, replacing any earlier entry.

    Kinds are keyed by name, so two types of the same name share an entry.
    """
    with _lock:
        _registry[_key(kind)] = tuple(args)


def get_labels(kind: Any) -> list[str] | None:
    """Return the labels registered for ``kind``, or None if there are none."""
    with _lock:
        labels = _registry.get(_key(kind))
    return None if labels is None else list(labels)
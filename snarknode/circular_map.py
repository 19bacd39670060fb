"""A small map that keeps at most a fixed number of entries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

__all__ = ["CircularMap"]

K = TypeVar("K")
V = TypeVar("V")


class CircularMap(Generic[K, V]):
    """Key-value pairs in insertion order; the oldest is dropped when full.

    Keys are compared by equality only, so they need not be hashable.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._entries: deque[tuple[K, V]] = deque(maxlen=capacity)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def capacity(self) -> int:
        """The maximum number of pairs held."""
        return self._entries.maxlen or 0

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._entries)

    def __iter__(self) -> Iterator[K]:
        return (k for k, _ in self._entries)

    def items(self) -> Iterator[tuple[K, V]]:
        """The pairs, oldest first."""
        return iter(list(self._entries))

    def get(self, key: K) -> V | None:
        """Return the value for ``key``, or None if it is absent."""
        return next((v for k, v in self._entries if k == key), None)

    def insert(self, key: K, value: V) -> bool:
        """Add a pair unless the key is present; return whether it was added."""
        if key in self:
            return False
        self._entries.append((key, value))
        return True

    def remove(self, key: K) -> None:
        """Drop the pair for ``key``, if present."""
        kept = [(k, v) for k, v in self._entries if k != key]
        self._entries = deque(kept, maxlen=self._entries.maxlen)

    def __repr__(self) -> str:
        return f"CircularMap(capacity={self.capacity()}, entries={list(self._entries)!r})"
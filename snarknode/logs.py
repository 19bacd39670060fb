"""A bounded cache of recent log lines for the terminal dashboard."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

__all__ = ["LogCache", "DEFAULT_LOG_LIMIT"]

DEFAULT_LOG_LIMIT = 128


def _decode(entry: bytes | str) -> str:
    if isinstance(entry, str):
        return entry
    try:
        return bytes(entry).decode("utf-8")
    except UnicodeDecodeError:
        return ""


class LogCache:
    """Holds up to ``limit`` log entries.

    When a batch would push the cache past its limit, the old entries are
    discarded and only the first ``limit`` entries of the batch are kept.
    Entries given as bytes that are not valid UTF-8 become empty strings.
    """

    def __init__(self, limit: int = DEFAULT_LOG_LIMIT) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self._entries: deque[str] = deque()

    def extend(self, entries: Iterable[bytes | str]) -> None:
        """Add a batch of entries."""
        batch = [_decode(entry) for entry in entries]
        if len(self._entries) + len(batch) > self.limit:
            self._entries.clear()
        self._entries.extend(batch[: self.limit])

    def text(self) -> str:
        """All cached entries joined together."""
        return "".join(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
"""A registry of running tasks that are torn down together."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any

__all__ = ["Tasks"]

_log = logging.getLogger(__name__)


def _join_in_background(thread: threading.Thread) -> None:
    def join() -> None:
        try:
            thread.join()
        except RuntimeError as error:
            _log.error("Can't join a thread: %r", error)

    threading.Thread(target=join, daemon=True).start()


def _destroy(item: Any) -> None:
    if isinstance(item, (asyncio.Future, concurrent.futures.Future)):
        item.cancel()
    elif isinstance(item, threading.Thread):
        _join_in_background(item)
    else:
        item.destroy()


def _is_droppable(item: Any) -> bool:
    return isinstance(
        item, (asyncio.Future, concurrent.futures.Future, threading.Thread)
    ) or callable(getattr(item, "destroy", None))


class Tasks:
    """Collects tasks and threads so they can all be stopped at once.

    Asyncio tasks and futures are cancelled, threads are joined in the
    background, and any other object must offer a ``destroy()`` method.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Any] = []
        self._closed = False

    def append(self, item: Any) -> None:
        """Register an item; ignored once the registry is closed."""
        if not _is_droppable(item):
            raise TypeError(f"cannot manage an object of type {type(item).__name__}")
        with self._lock:
            if self._closed:
                return
            self._items.append(item)

    def flush(self) -> None:
        """Stop every registered item and forget it."""
        with self._lock:
            items, self._items = self._items, []
        for item in items:
            _destroy(item)

    def close(self) -> None:
        """Stop everything registered and accept nothing further."""
        with self._lock:
            self._closed = True
        self.flush()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __enter__(self) -> Tasks:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
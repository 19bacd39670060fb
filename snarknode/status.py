"""The shared, thread-safe state of a running node."""

from __future__ import annotations

import enum
import threading

__all__ = ["State", "Status"]


class State(enum.IntEnum):
    """What the ledger is currently doing."""

    READY = 0
    MINING = 1
    PEERING = 2
    SYNCING = 3
    SHUTTING_DOWN = 4

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


class Status:
    """A state holder that may be shared between threads; starts as peering."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = State.PEERING

    def update(self, state: State) -> None:
        """Set the current state."""
        state = State(state)
        with self._lock:
            self._state = state

    def get(self) -> State:
        """Return the current state."""
        with self._lock:
            return self._state

    def is_ready(self) -> bool:
        return self.get() is State.READY

    def is_mining(self) -> bool:
        return self.get() is State.MINING

    def is_peering(self) -> bool:
        return self.get() is State.PEERING

    def is_syncing(self) -> bool:
        return self.get() is State.SYNCING

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        return f"Status({self.get()!s})"
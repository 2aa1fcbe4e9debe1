"""Snapshot listener registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

TSnapshot = TypeVar("TSnapshot")


class ListenerRegistry(Generic[TSnapshot]):
    """In-process listener set with stable per-round delivery."""

    def __init__(self) -> None:
        self._next_id = 1
        self._listeners: dict[int, Callable[[TSnapshot], None]] = {}

    def __len__(self) -> int:
        return len(self._listeners)

    def add(self, listener: Callable[[TSnapshot], None]) -> int:
        """Register listener and return its id."""
        listener_id = self._next_id
        self._next_id += 1
        self._listeners[listener_id] = listener
        return listener_id

    def remove(self, listener_id: int) -> None:
        """Remove a listener if present."""
        self._listeners.pop(listener_id, None)

    def clear(self) -> None:
        self._listeners.clear()

    def publish(self, snapshot: TSnapshot) -> int:
        """Deliver snapshot and return number of invoked listeners."""
        invoked = 0
        for listener in tuple(self._listeners.values()):
            listener(snapshot)
            invoked += 1
        return invoked

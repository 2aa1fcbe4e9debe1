"""Layered root + overlay item storage for the visible modal stack."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class ModalLayerStack(Generic[T]):
    """Root-first item stack; index 0 is the root, last item is topmost."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def load(self, items: Iterable[T]) -> None:
        """Replace all layers with a copy of ``items``."""
        self._items = list(items)

    def take(self) -> tuple[T, ...]:
        """Remove and return all layers."""
        items = tuple(self._items)
        self._items = []
        return items

    def push(self, item: T) -> None:
        """Push one layer above the current top."""
        self._items.append(item)

    def pop_overlay(self) -> T | None:
        """Pop topmost layer, never the root."""
        if len(self._items) <= 1:
            return None
        return self._items.pop()

    def replace_root(self, item: T) -> T | None:
        """Swap the root layer and return the previous one."""
        if not self._items:
            self._items.append(item)
            return None
        previous = self._items[0]
        self._items[0] = item
        return previous

    def top(self) -> T | None:
        """Return topmost visible layer."""
        return self._items[-1] if self._items else None

    def layers(self) -> tuple[T, ...]:
        """Return root-first layer snapshot."""
        return tuple(self._items)

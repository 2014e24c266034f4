"""An array of bounded capacity with 1-based positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class FixedArray:
    """Array holding at most ``capacity`` items, addressed by 1-based positions."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, item: Any, position: int) -> None:
        """Insert item at 1-based position, shifting later items right.

        Into an empty array the item always goes first.
        """
        if len(self._items) == self._capacity:
            raise OverflowError("array full")
        if not self._items:
            self._items.append(item)
            return
        if not 1 <= position <= len(self._items) + 1:
            raise IndexError(f"position must be between 1 and {len(self._items) + 1}")
        self._items.insert(position - 1, item)

    def delete(self, position: int) -> Any:
        """Remove and return the item at 1-based position."""
        if not 1 <= position <= len(self._items):
            raise IndexError("array index out of bounds")
        return self._items.pop(position - 1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
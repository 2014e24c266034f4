"""Double-ended queues: a bounded array deque and an unbounded linked deque."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.doubly_linked_list import DoublyLinkedList


class ArrayDeque:
    """Deque over a fixed block of slots.

    Items occupy one contiguous run of slots. The rear can grow only up to the
    last slot and the front only down to slot 0, so a deque that was filled
    from the front cannot take another front item until it empties.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _reset(self) -> None:
        self._front = self._rear = -1

    def insert_rear(self, item: Any) -> None:
        """Add item after the current rear."""
        if self._rear == len(self._slots) - 1:
            raise OverflowError("deque full at rear")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = item

    def insert_front(self, item: Any) -> None:
        """Add item before the current front."""
        if self._front == 0:
            raise OverflowError("deque full at front")
        if self._rear == -1:
            self._front = self._rear = 0
        else:
            self._front -= 1
        self._slots[self._front] = item

    def delete_front(self) -> Any:
        """Remove and return the front item."""
        if self._front == -1:
            raise IndexError("deque empty")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front == self._rear + 1:
            self._reset()
        return item

    def delete_rear(self) -> Any:
        """Remove and return the rear item."""
        if self._rear == -1:
            raise IndexError("deque empty")
        item = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear -= 1
        if self._rear == self._front - 1:
            self._reset()
        return item

    def __len__(self) -> int:
        return 0 if self._front == -1 else self._rear - self._front + 1

    def __iter__(self) -> Iterator[Any]:
        if self._front == -1:
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class LinkedDeque:
    """Unbounded deque kept in a doubly linked list."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def insert_rear(self, item: Any) -> None:
        """Add item at the rear."""
        self._items.insert_end(item)

    def insert_front(self, item: Any) -> None:
        """Add item at the front."""
        self._items.insert_beginning(item)

    def delete_front(self) -> Any:
        """Remove and return the front item."""
        try:
            return self._items.delete_beginning()
        except IndexError:
            raise IndexError("deque empty") from None

    def delete_rear(self) -> Any:
        """Remove and return the rear item."""
        try:
            return self._items.delete_end()
        except IndexError:
            raise IndexError("deque empty") from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
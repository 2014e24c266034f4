"""A doubly linked list with a sentinel head, and a palindrome check built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list supporting inserts, deletes and in-place reversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        for item in items:
            self.insert_end(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _find(self, key: Any) -> _Node:
        for node in self._nodes():
            if node.data == key:
                return node
        raise ValueError(f"{key} not found")

    def _last(self) -> _Node:
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    @staticmethod
    def _link_after(anchor: _Node, item: Any) -> None:
        new = _Node(item)
        new.prev = anchor
        new.next = anchor.next
        anchor.next = new
        if new.next is not None:
            new.next.prev = new

    @staticmethod
    def _unlink(node: _Node) -> Any:
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        return node.data

    def insert_beginning(self, item: Any) -> None:
        """Insert item at the front."""
        self._link_after(self._head, item)

    def insert_end(self, item: Any) -> None:
        """Append item at the end."""
        self._link_after(self._last(), item)

    def insert_after(self, item: Any, key: Any) -> None:
        """Insert item after the first node holding key."""
        self._link_after(self._find(key), item)

    def insert_before(self, item: Any, key: Any) -> None:
        """Insert item before the first node holding key."""
        self._link_after(self._find(key).prev, item)

    def delete_beginning(self) -> Any:
        """Remove and return the first item."""
        if self._head.next is None:
            raise IndexError("no elements found")
        return self._unlink(self._head.next)

    def delete_end(self) -> Any:
        """Remove and return the last item."""
        if self._head.next is None:
            raise IndexError("no elements found")
        return self._unlink(self._last())

    def delete(self, key: Any) -> Any:
        """Remove the first node holding key and return its item."""
        if self._head.next is None:
            raise IndexError("list empty")
        return self._unlink(self._find(key))

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        node = self._head.next
        if node is None:
            return
        last = node
        while node is not None:
            node.prev, node.next = node.next, node.prev
            last = node
            node = node.prev
        # The old first node now points back at the head; it ends the list.
        first_old = self._head.next
        first_old.next = None
        last.prev = self._head
        self._head.next = last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._last()
        while node is not self._head:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def palindrome_ignoring_case(text: str) -> bool:
    """Tell whether text reads the same both ways, ASCII letters compared case-insensitively."""
    folded = (ch.upper() if "a" <= ch <= "z" else ch for ch in text)
    chars = DoublyLinkedList()
    for ch in folded:
        chars.insert_beginning(ch)
    return all(a == b for a, b in zip(chars, reversed(chars)))
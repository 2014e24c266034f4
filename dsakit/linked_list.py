"""A singly linked list with a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data: Any, link: _Node | None = None) -> None:
        self.data = data
        self.link = link


class SinglyLinkedList:
    """Singly linked list supporting positional inserts, deletes and reversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        tail = self._head
        for item in items:
            tail.link = _Node(item)
            tail = tail.link

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.link
        while node is not None:
            yield node
            node = node.link

    def _locate(self, key: Any) -> tuple[_Node, _Node]:
        """Return (predecessor, node) of the first node holding key."""
        prev = self._head
        for node in self._nodes():
            if node.data == key:
                return prev, node
            prev = node
        raise ValueError(f"{key} not found")

    def insert_beginning(self, item: Any) -> None:
        """Insert item at the front of the list."""
        self._head.link = _Node(item, self._head.link)

    def insert_end(self, item: Any) -> None:
        """Append item at the end of the list."""
        tail = self._head
        while tail.link is not None:
            tail = tail.link
        tail.link = _Node(item)

    def insert_after(self, item: Any, key: Any) -> None:
        """Insert item right after the first node holding key."""
        _, node = self._locate(key)
        node.link = _Node(item, node.link)

    def insert_before(self, item: Any, key: Any) -> None:
        """Insert item right before the first node holding key."""
        prev, node = self._locate(key)
        prev.link = _Node(item, node)

    def delete_beginning(self) -> Any:
        """Remove and return the first item."""
        first = self._head.link
        if first is None:
            raise IndexError("list empty")
        self._head.link = first.link
        return first.data

    def delete_end(self) -> Any:
        """Remove and return the last item."""
        if self._head.link is None:
            raise IndexError("list empty")
        prev = self._head
        node = self._head.link
        while node.link is not None:
            prev, node = node, node.link
        prev.link = None
        return node.data

    def delete(self, key: Any) -> Any:
        """Remove the first node holding key and return its item."""
        if self._head.link is None:
            raise IndexError("list empty")
        prev, node = self._locate(key)
        prev.link = node.link
        return node.data

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev = None
        node = self._head.link
        while node is not None:
            nxt = node.link
            node.link = prev
            prev, node = node, nxt
        self._head.link = prev

    def search(self, key: Any) -> int:
        """Return the 1-based position of the first node holding key."""
        for position, node in enumerate(self._nodes(), start=1):
            if node.data == key:
                return position
        raise ValueError(f"{key} is not present in this list")

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
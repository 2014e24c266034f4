"""A circular singly linked list whose sentinel head closes the ring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data: Any, link: _Node | None = None) -> None:
        self.data = data
        self.link = link


class CircularLinkedList:
    """Circular linked list: the last node links back to the head sentinel."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._head.link = self._head
        for item in items:
            self.insert_end(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.link
        while node is not self._head:
            yield node
            node = node.link

    def _locate(self, key: Any) -> tuple[_Node, _Node]:
        prev = self._head
        for node in self._nodes():
            if node.data == key:
                return prev, node
            prev = node
        raise ValueError(f"{key} not found")

    def _last(self) -> _Node:
        node = self._head
        while node.link is not self._head:
            node = node.link
        return node

    def insert_beginning(self, item: Any) -> None:
        """Insert item right after the head."""
        self._head.link = _Node(item, self._head.link)

    def insert_end(self, item: Any) -> None:
        """Insert item just before the head, closing the ring."""
        self._last().link = _Node(item, self._head)

    def insert_after(self, item: Any, key: Any) -> None:
        """Insert item after the first node holding key."""
        _, node = self._locate(key)
        node.link = _Node(item, node.link)

    def insert_before(self, item: Any, key: Any) -> None:
        """Insert item before the first node holding key."""
        prev, node = self._locate(key)
        prev.link = _Node(item, node)

    def delete_beginning(self) -> Any:
        """Remove and return the first item."""
        first = self._head.link
        if first is self._head:
            raise IndexError("list empty")
        self._head.link = first.link
        return first.data

    def delete_end(self) -> Any:
        """Remove and return the last item."""
        if self._head.link is self._head:
            raise IndexError("list empty")
        prev = self._head
        node = self._head.link
        while node.link is not self._head:
            prev, node = node, node.link
        prev.link = self._head
        return node.data

    def delete(self, key: Any) -> Any:
        """Remove the first node holding key and return its item."""
        if self._head.link is self._head:
            raise IndexError("list empty")
        prev, node = self._locate(key)
        prev.link = node.link
        return node.data

    def reverse(self) -> None:
        """Reverse the ring in place."""
        prev = self._head
        node = self._head.link
        while node is not self._head:
            nxt = node.link
            node.link = prev
            prev, node = node, nxt
        self._head.link = prev

    def __contains__(self, item: Any) -> bool:
        return any(node.data == item for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
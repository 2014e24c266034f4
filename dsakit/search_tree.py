"""A binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


def _inorder(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _leaves(node: _Node | None) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


class BinarySearchTree:
    """Binary search tree; inserting a value already present is an error."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for item in items:
            self.insert(item)

    def _find(self, item: Any) -> tuple[_Node | None, _Node | None]:
        """Return (parent, node) for item; node is None when absent."""
        parent = None
        node = self._root
        while node is not None and node.data != item:
            parent = node
            node = node.right if item > node.data else node.left
        return parent, node

    def insert(self, item: Any) -> None:
        """Insert item at its ordered place."""
        new = _Node(item)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if item == node.data:
                raise ValueError(f"{item} already present")
            side = "right" if item > node.data else "left"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new)
                return
            node = child

    def delete(self, item: Any) -> None:
        """Remove item; a node with two children takes its inorder successor's value."""
        if self._root is None:
            raise ValueError("no items found")
        parent, node = self._find(item)
        if node is None:
            raise ValueError(f"{item} not found")
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            value = successor.data
            self.delete(value)
            node.data = value
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def inorder(self) -> list[Any]:
        """All values in ascending order."""
        return list(_inorder(self._root))

    def inorder_successor(self, item: Any) -> Any | None:
        """Smallest value in item's right subtree, or None if it has none."""
        _, node = self._find(item)
        if node is None:
            raise ValueError(f"{item} not found")
        successor = node.right
        if successor is None:
            return None
        while successor.left is not None:
            successor = successor.left
        return successor.data

    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return _leaves(self._root)

    def __contains__(self, item: Any) -> bool:
        return self._find(item)[1] is not None

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root))

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"
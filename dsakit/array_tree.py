"""A binary tree stored in an array: node i has children at 2i and 2i+1."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any


def build_array_tree(
    root_value: Any, ask_child: Callable[[Any, str], Any], size: int = 30
) -> list[Any]:
    """Build an array-backed tree by asking for each node's children.

    Slot 1 holds the root; slot 0 and empty slots hold None.
    ``ask_child(value, side)`` is called with ``"left"`` then ``"right"`` and
    returns the child's value or None. A child whose slot lies past the end
    of the array raises IndexError.
    """
    slots: list[Any] = [None] * size

    def place(index: int, value: Any) -> None:
        if index >= size:
            raise IndexError(f"slot {index} is beyond the tree size {size}")
        slots[index] = value
        left = ask_child(value, "left")
        if left is not None:
            place(2 * index, left)
        right = ask_child(value, "right")
        if right is not None:
            place(2 * index + 1, right)

    place(1, root_value)
    return slots


def _inorder(slots: Sequence[Any], index: int) -> Iterator[Any]:
    if index >= len(slots) or slots[index] is None:
        return
    yield from _inorder(slots, 2 * index)
    yield slots[index]
    yield from _inorder(slots, 2 * index + 1)


def array_inorder(slots: Sequence[Any]) -> list[Any]:
    """Values of an array-backed tree in inorder, starting at slot 1."""
    return list(_inorder(slots, 1))
"""A linked binary tree with level-order insertion and deletion, traversals and measures."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _height(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _leaves(node: TreeNode | None) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves(node.left) + _leaves(node.right)


def _count(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return _count(node.left) + _count(node.right) + 1


class BinaryTree:
    """Binary tree that fills itself level by level."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    def insert(self, item: Any) -> None:
        """Place item in the first free child slot found in level order."""
        new = TreeNode(item)
        if self.root is None:
            self.root = new
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = new
                return
            queue.append(node.left)
            if node.right is None:
                node.right = new
                return
            queue.append(node.right)

    def delete(self, key: Any) -> None:
        """Delete key by overwriting it with the deepest, rightmost node's value.

        The node overwritten is the last one in level order that holds key;
        the deepest, rightmost node is then detached.
        """
        root = self.root
        if root is None:
            raise ValueError(f"{key} not found")
        if root.left is None and root.right is None:
            if root.data == key:
                self.root = None
                return
            raise ValueError(f"{key} not found")

        key_node: TreeNode | None = None
        parent = root
        last = root
        queue = deque([root])
        while queue:
            last = queue.popleft()
            if last.data == key:
                key_node = last
            for child in (last.left, last.right):
                if child is not None:
                    parent = last
                    queue.append(child)

        if key_node is None:
            raise ValueError(f"{key} not found")
        key_node.data = last.data
        if parent.left is last:
            parent.left = None
        else:
            parent.right = None

    def inorder(self) -> list[Any]:
        """Values in inorder, computed recursively."""
        return list(_inorder(self.root))

    def preorder(self) -> list[Any]:
        """Values in preorder, computed recursively."""
        return list(_preorder(self.root))

    def postorder(self) -> list[Any]:
        """Values in postorder, computed recursively."""
        return list(_postorder(self.root))

    def inorder_iterative(self) -> list[Any]:
        """Values in inorder, computed with an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            top = stack.pop()
            out.append(top.data)
            node = top.right
        return out

    def preorder_iterative(self) -> list[Any]:
        """Values in preorder, computed with an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                out.append(node.data)
                stack.append(node)
                node = node.left
            node = stack.pop().right
        return out

    def postorder_iterative(self) -> list[Any]:
        """Values in postorder, computed with one stack holding right children."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while True:
            while node is not None:
                if node.right is not None:
                    stack.append(node.right)
                stack.append(node)
                node = node.left
            if stack:
                node = stack.pop()
                if node.right is not None and stack and stack[-1] is node.right:
                    stack.pop()
                    stack.append(node)
                    node = node.right
                else:
                    out.append(node.data)
                    node = None
            if not stack:
                break
        return out

    def postorder_two_stacks(self) -> list[Any]:
        """Values in postorder, computed with two stacks."""
        if self.root is None:
            return []
        first = [self.root]
        second: list[TreeNode] = []
        while first:
            node = first.pop()
            second.append(node)
            if node.left is not None:
                first.append(node.left)
            if node.right is not None:
                first.append(node.right)
        return [node.data for node in reversed(second)]

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
        return _height(self.root)

    def max_depth(self) -> int:
        """Number of edges on the longest root-to-leaf path (height minus one)."""
        return _height(self.root) - 1

    def leaf_count(self) -> int:
        """Number of nodes without children."""
        return _leaves(self.root)

    def node_count(self) -> int:
        """Number of nodes in the tree."""
        return _count(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(preorder={self.preorder()!r})"


def build_tree(root_value: Any, ask_child: Callable[[Any, str], Any]) -> BinaryTree:
    """Build a tree top-down by asking for each node's children.

    ``ask_child(value, side)`` is called with side ``"left"`` and then
    ``"right"``; it returns the child's value, or None when there is no child.
    A left subtree is finished before the right child is asked for.
    """

    def grow(value: Any) -> TreeNode:
        node = TreeNode(value)
        left = ask_child(value, "left")
        if left is not None:
            node.left = grow(left)
        right = ask_child(value, "right")
        if right is not None:
            node.right = grow(right)
        return node

    return BinaryTree(grow(root_value))
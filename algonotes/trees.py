"""Binary tree problems: traversals, side views and reconstruction."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, None standing for a missing child.

    Children are read in pairs for each present node, left to right.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    exhausted = object()

    def make_child() -> TreeNode | None | object:
        value = next(items, exhausted)
        if value is exhausted:
            return exhausted
        if value is None:
            return None
        child = TreeNode(value)
        queue.append(child)
        return child

    while queue:
        node = queue.popleft()
        left = make_child()
        if left is exhausted:
            break
        node.left = left
        right = make_child()
        if right is exhausted:
            break
        node.right = right
    return root


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, root order."""
    if root is None:
        return []
    pending = [root]
    finished: list[TreeNode] = []
    while pending:
        node = pending.pop()
        finished.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.val for node in reversed(finished)]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of every level, top to bottom."""
    if root is None:
        return []
    result: list[int] = []
    level = [root]
    while level:
        result.append(level[-1].val)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("preorder and inorder must have the same length")
    position = {value: i for i, value in enumerate(inorder)}
    roots = iter(preorder)

    def construct(lo: int, hi: int) -> TreeNode | None:
        if lo > hi:
            return None
        value = next(roots)
        i = position.get(value)
        if i is None or not lo <= i <= hi:
            raise ValueError("traversals do not describe the same tree")
        node = TreeNode(value)
        node.left = construct(lo, i - 1)
        node.right = construct(i + 1, hi)
        return node

    return construct(0, len(inorder) - 1)
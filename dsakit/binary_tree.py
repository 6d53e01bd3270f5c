"""Binary trees: construction from traversals and the standard traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_from_markers(tokens: Iterable[Any]) -> TreeNode | None:
    """Build a tree from a preorder token stream where -1 marks a missing child."""
    stream = iter(tokens)

    def read() -> TreeNode | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("token sequence ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = read()
        node.right = read()
        return node

    return read()


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, node, right order."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped level by level, left to right."""
    levels: list[list[Any]] = []
    pending = deque([root] if root is not None else [])
    while pending:
        level = []
        for _ in range(len(pending)):
            node = pending.popleft()
            level.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        levels.append(level)
    return levels


def _positions(
    order: Sequence[Any], inorder_values: Sequence[Any]
) -> dict[Any, int]:
    if len(order) != len(inorder_values):
        raise ValueError("traversals must have the same length")
    positions = {value: index for index, value in enumerate(inorder_values)}
    if any(value not in positions for value in order):
        raise ValueError("traversals must hold the same values")
    return positions


def build_from_preorder_inorder(
    preorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    positions = _positions(preorder_values, inorder_values)
    upcoming = iter(preorder_values)
    missing = object()

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(upcoming, missing)
        if value is missing:
            return None
        node = TreeNode(value)
        split = positions[value]
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(inorder_values) - 1)


def build_from_inorder_postorder(
    inorder_values: Sequence[Any], postorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    positions = _positions(postorder_values, inorder_values)
    upcoming = iter(reversed(postorder_values))
    missing = object()

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(upcoming, missing)
        if value is missing:
            return None
        node = TreeNode(value)
        split = positions[value]
        node.right = build(split + 1, end)
        node.left = build(start, split - 1)
        return node

    return build(0, len(inorder_values) - 1)
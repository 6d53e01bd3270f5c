"""Measurements and searches over binary trees."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any

from .binary_tree import TreeNode


class _Cover(Enum):
    NEEDS_CAMERA = 0
    COVERED = 1
    HAS_CAMERA = 2


def min_camera_cover(root: TreeNode | None) -> int:
    """Fewest cameras such that every node has a camera on itself, its parent or a child."""
    cameras = 0

    def visit(node: TreeNode | None) -> _Cover:
        nonlocal cameras
        if node is None:
            return _Cover.COVERED
        states = (visit(node.left), visit(node.right))
        if _Cover.NEEDS_CAMERA in states:
            cameras += 1
            return _Cover.HAS_CAMERA
        if _Cover.HAS_CAMERA in states:
            return _Cover.COVERED
        return _Cover.NEEDS_CAMERA

    if visit(root) is _Cover.NEEDS_CAMERA:
        cameras += 1
    return cameras


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def is_balanced(root: TreeNode | None) -> bool:
    """True when every node's subtrees differ in height by at most one."""

    def balanced_height(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) >= 2:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def _edge_height(node: TreeNode | None, side: str) -> int:
    count = 0
    while node is not None:
        count += 1
        node = getattr(node, side)
    return count


def count_complete_nodes(root: TreeNode | None) -> int:
    """Node count of a complete tree, skipping perfect subtrees."""
    if root is None:
        return 0
    left = _edge_height(root, "left")
    if left == _edge_height(root, "right"):
        return 2**left - 1
    return count_complete_nodes(root.left) + count_complete_nodes(root.right) + 1


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both p and q (by identity) in its subtree."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def max_width(root: TreeNode | None) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    widest = 0
    level = deque([(root, 1)])
    while level:
        widest = max(widest, level[-1][1] - level[0][1] + 1)
        for _ in range(len(level)):
            node, index = level.popleft()
            if node.left is not None:
                level.append((node.left, 2 * index))
            if node.right is not None:
                level.append((node.right, 2 * index + 1))
    return widest


def has_path_sum(root: TreeNode | None, target_sum: Any) -> bool:
    """True when some root-to-leaf path adds up to target_sum."""
    stack = [(root, root.value)] if root is not None else []
    while stack:
        node, total = stack.pop()
        if node.left is None and node.right is None:
            if total == target_sum:
                return True
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, total + child.value))
    return False


def path_sums(root: TreeNode | None, target_sum: Any) -> list[list[Any]]:
    """Every root-to-leaf path adding up to target_sum, left paths first."""
    found: list[list[Any]] = []
    path: list[Any] = []

    def walk(node: TreeNode | None, total: Any) -> None:
        if node is None:
            return
        total += node.value
        path.append(node.value)
        if node.left is None and node.right is None:
            if total == target_sum:
                found.append(list(path))
        else:
            walk(node.left, total)
            walk(node.right, total)
        path.pop()

    walk(root, 0)
    return found
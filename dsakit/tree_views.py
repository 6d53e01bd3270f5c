"""Views and outlines of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Any

from .binary_tree import TreeNode


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def top_view(root: TreeNode | None) -> list[Any]:
    """Values seen from above, from the leftmost column to the rightmost."""
    if root is None:
        return []
    seen: dict[int, Any] = {}
    pending = deque([(root, 0)])
    while pending:
        node, column = pending.popleft()
        seen.setdefault(column, node.value)
        if node.left is not None:
            pending.append((node.left, column - 1))
        if node.right is not None:
            pending.append((node.right, column + 1))
    return [seen[column] for column in range(min(seen), max(seen) + 1)]


def _leaves(root: TreeNode | None) -> list[Any]:
    found = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if _is_leaf(node):
            found.append(node.value)
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)
    return found


def boundary_traversal(root: TreeNode | None) -> list[Any]:
    """Root, left edge downwards, leaves left to right, then right edge upwards."""
    if root is None:
        return []
    result = [root.value]
    node = root.left
    while node is not None and not _is_leaf(node):
        result.append(node.value)
        node = node.left if node.left is not None else node.right
    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))
    right_edge = []
    node = root.right
    while node is not None and not _is_leaf(node):
        right_edge.append(node.value)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def nodes_at_distance(root: TreeNode | None, target: TreeNode, k: int) -> list[Any]:
    """Values of the nodes exactly k edges away from target, in search order."""
    parents: dict[TreeNode, TreeNode | None] = {}
    stack = [root] if root is not None else []
    if root is not None:
        parents[root] = None
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                stack.append(child)
    frontier = deque([target])
    visited = {target}
    for _ in range(k):
        if not frontier:
            break
        for _ in range(len(frontier)):
            node = frontier.popleft()
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in visited:
                    visited.add(neighbour)
                    frontier.append(neighbour)
    return [node.value for node in frontier]


def left_view(root: TreeNode | None) -> list[Any]:
    """The first value of each level."""
    view = []
    pending = deque([root] if root is not None else [])
    while pending:
        view.append(pending[0].value)
        for _ in range(len(pending)):
            node = pending.popleft()
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
    return view
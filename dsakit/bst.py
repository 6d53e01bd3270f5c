"""Binary search tree built from BSTNode objects."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BSTNode:
    """A node; smaller values go left, equal or larger values go right."""

    value: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


def insert(root: BSTNode | None, value: Any) -> BSTNode:
    """Insert value and return the root of the tree."""
    node = BSTNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[Any]) -> BSTNode | None:
    """Build a tree by inserting values in order."""
    root = None
    for value in values:
        root = insert(root, value)
    return root


def delete(root: BSTNode | None, key: Any) -> BSTNode | None:
    """Remove one node holding key and return the new root."""
    if root is None:
        return None
    if key < root.value:
        root.left = delete(root.left, key)
        return root
    if key > root.value:
        root.right = delete(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    largest = maximum(root.left)
    root.value = largest
    root.left = delete(root.left, largest)
    return root


def search(root: BSTNode | None, target: Any) -> bool:
    """True when target is stored in the tree."""
    node = root
    while node is not None:
        if node.value == target:
            return True
        node = node.left if target < node.value else node.right
    return False


def minimum(root: BSTNode | None) -> Any:
    """Smallest value in the tree."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root.value


def maximum(root: BSTNode | None) -> Any:
    """Largest value in the tree."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    while root.right is not None:
        root = root.right
    return root.value


def level_order(root: BSTNode | None) -> list[list[Any]]:
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


def preorder(root: BSTNode | None) -> list[Any]:
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


def inorder(root: BSTNode | None) -> list[Any]:
    """Values in left, node, right order."""
    result = []
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: BSTNode | None) -> list[Any]:
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
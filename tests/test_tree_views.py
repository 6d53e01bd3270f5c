from collections import deque

import pytest

from dsakit.binary_tree import TreeNode, level_order
from dsakit.tree_views import (
    boundary_traversal,
    left_view,
    nodes_at_distance,
    top_view,
)


def from_level(values):
    values = list(values)
    if not values or values[0] is None:
        return None
    stream = iter(values)
    root = TreeNode(next(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(stream)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def edge(root, side):
    values = []
    node = root
    while node is not None:
        values.append(node.value)
        node = getattr(node, side)
    return values


@pytest.mark.parametrize(
    "values",
    [list(range(1, 16)), [1, 2, 3, None, 5, None, 7, 8], [3, 5, 1, 6, 2, 0, 8, None, None, 7, 4]],
)
def test_left_view_is_first_of_each_level(values):
    root = from_level(values)
    assert left_view(root) == [level[0] for level in level_order(root)]


def test_left_view_of_right_chain():
    root = TreeNode(1, right=TreeNode(2, right=TreeNode(3)))
    assert left_view(root) == edge(root, "right")


@pytest.mark.parametrize("n", [1, 2, 3, 7, 10, 15])
def test_top_view_of_complete_tree_follows_outer_edges(n):
    root = from_level(range(1, n + 1))
    left = edge(root, "left")
    right = edge(root, "right")
    assert top_view(root) == list(reversed(left[1:])) + [root.value] + right[1:]


def test_top_view_of_empty_tree():
    assert top_view(None) == []


def test_boundary_of_perfect_tree():
    assert boundary_traversal(from_level(range(1, 8))) == [1, 2, 4, 5, 6, 7, 3]


def test_boundary_of_single_node():
    root = TreeNode(42)
    assert boundary_traversal(root) == [root.value]


def test_boundary_holds_leaves_in_order_once():
    root = from_level(range(1, 16))
    boundary = boundary_traversal(root)
    leaves = level_order(root)[-1]
    start = boundary.index(leaves[0])
    assert boundary[start : start + len(leaves)] == leaves
    assert boundary[0] == root.value
    assert len(set(boundary)) == len(boundary)


def test_nodes_at_distance_example():
    root = from_level([3, 5, 1, 6, 2, 0, 8, None, None, 7, 4])
    assert nodes_at_distance(root, root.left, 2) == [7, 4, 1]


def test_nodes_at_distance_from_root_are_levels():
    root = from_level(range(1, 16))
    for k, level in enumerate(level_order(root)):
        assert nodes_at_distance(root, root, k) == level


def test_nodes_at_distance_zero_and_beyond():
    root = from_level(range(1, 8))
    target = root.left.right
    assert nodes_at_distance(root, target, 0) == [target.value]
    assert not nodes_at_distance(root, target, 10)
import pytest

from dsakit.bst import (
    build_bst,
    delete,
    inorder,
    insert,
    level_order,
    maximum,
    minimum,
    postorder,
    preorder,
    search,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


@pytest.fixture
def tree():
    return build_bst(VALUES)


def test_inorder_is_sorted(tree):
    assert inorder(tree) == sorted(VALUES)


def test_root_positions_in_traversals(tree):
    assert preorder(tree)[0] == VALUES[0]
    assert postorder(tree)[-1] == VALUES[0]
    assert level_order(tree)[0] == [VALUES[0]]


def test_traversals_hold_every_value(tree):
    for values in (preorder(tree), postorder(tree)):
        assert sorted(values) == sorted(VALUES)
    assert sorted(v for level in level_order(tree) for v in level) == sorted(VALUES)


def test_level_order_second_level(tree):
    assert level_order(tree)[1] == [30, 70]


def test_preorder_matches_insertion_shape():
    root = build_bst([2, 1, 3])
    assert preorder(root) == [2, 1, 3]
    assert postorder(root) == [1, 3, 2]


def test_search(tree):
    assert all(search(tree, value) for value in VALUES)
    assert not search(tree, 77)
    assert not search(None, 1)


def test_min_max(tree):
    assert minimum(tree) == min(VALUES)
    assert maximum(tree) == max(VALUES)


def test_min_max_empty():
    with pytest.raises(ValueError):
        minimum(None)
    with pytest.raises(ValueError):
        maximum(None)


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_value(key):
    root = delete(build_bst(VALUES), key)
    remaining = sorted(VALUES)
    remaining.remove(key)
    assert inorder(root) == remaining
    assert not search(root, key)


def test_delete_root_with_two_children_uses_left_maximum(tree):
    left_max = max(v for v in VALUES if v < VALUES[0])
    root = delete(tree, VALUES[0])
    assert root.value == left_max


def test_delete_missing_key_keeps_tree(tree):
    root = delete(tree, 999)
    assert inorder(root) == sorted(VALUES)


def test_delete_last_node():
    assert delete(build_bst([5]), 5) is None


def test_insert_into_empty_and_duplicates():
    root = insert(None, 10)
    insert(root, 10)
    insert(root, 5)
    assert inorder(root) == [5, 10, 10]
    assert root.right.value == root.value


def test_empty_traversals():
    assert inorder(None) == []
    assert preorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []


def test_deep_tree_traversal():
    values = list(range(3000))
    root = build_bst(values)
    assert inorder(root) == values
    assert len(level_order(root)) == len(values)
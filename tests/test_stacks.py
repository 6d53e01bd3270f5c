import pytest

from dsakit.stacks import (
    count_redundant_brackets,
    insert_at_bottom,
    is_sorted_stack,
    middle_of_stack,
    next_smaller,
    previous_smaller,
    reverse_stack,
    reverse_string,
    sorted_insert,
)


def test_is_sorted_stack():
    assert is_sorted_stack([50, 40, 30, 20, 10]) is True
    assert is_sorted_stack([10, 20, 30]) is False
    assert is_sorted_stack([]) is True


def test_is_sorted_stack_leaves_stack_alone():
    stack = [50, 40, 30, 20, 10]
    is_sorted_stack(stack)
    assert stack == [50, 40, 30, 20, 10]


def test_middle_of_stack():
    assert middle_of_stack([10, 20, 30, 40, 50]) == 30
    with pytest.raises(IndexError):
        middle_of_stack([])


def test_insert_at_bottom():
    stack = [10, 20, 30, 40, 50, 60]
    insert_at_bottom(stack, 19)
    insert_at_bottom(stack, 78)
    assert stack == [78, 19, 10, 20, 30, 40, 50, 60]


def test_next_smaller():
    assert next_smaller([8, 6, 2, 4, 3]) == [6, 2, -1, 3, -1]


def test_previous_smaller():
    assert previous_smaller([8, 4, 6, 2, 3]) == [-1, -1, 4, -1, 2]


def test_smaller_results_are_smaller():
    data = [5, 9, 1, 7, 3, 8, 2]
    for value, found in zip(data, next_smaller(data)):
        assert found == -1 or found < value
    for value, found in zip(data, previous_smaller(data)):
        assert found == -1 or found < value


def test_count_redundant_brackets():
    assert count_redundant_brackets("((1)*((3+6)))") == 2
    assert count_redundant_brackets("(a+b)") == 0


def test_unbalanced_bracket_raises():
    with pytest.raises(ValueError):
        count_redundant_brackets("a+b)")


def test_reverse_string_round_trip():
    text = "amitchowdhury"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text) == text[::-1]


def test_reverse_stack():
    stack = [10, 20, 30, 40, 50]
    reverse_stack(stack)
    assert stack == [50, 40, 30, 20, 10]


def test_sorted_insert_keeps_order():
    stack = [10, 20, 30, 40, 50]
    sorted_insert(stack, 40)
    sorted_insert(stack, 5)
    sorted_insert(stack, 60)
    assert stack == sorted(stack)
    assert len(stack) == 8
    assert stack.count(40) == 2
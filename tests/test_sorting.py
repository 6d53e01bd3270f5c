import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_ARRAY = [72, 34, 90, 23, 56, 87, 34, 12, 74, 0]
SOURCE_SORTED = [0, 12, 23, 34, 34, 56, 72, 74, 87, 90]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(0, 50) for _ in range(size)] for size in range(0, 40)]


def test_sorts_source_array():
    assert bubble_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert selection_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert insertion_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert merge_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert quick_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert counting_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert heap_sort(SOURCE_ARRAY) == SOURCE_SORTED


def test_sorts_random_lists():
    for values in _random_lists():
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert selection_sort(values) == expected
        assert insertion_sort(values) == expected
        assert merge_sort(values) == expected
        assert quick_sort(values) == expected
        assert counting_sort(values) == expected
        assert heap_sort(values) == expected


def test_input_is_not_modified():
    values = list(SOURCE_ARRAY)
    assert bubble_sort(values) == SOURCE_SORTED
    assert selection_sort(values) == SOURCE_SORTED
    assert insertion_sort(values) == SOURCE_SORTED
    assert merge_sort(values) == SOURCE_SORTED
    assert quick_sort(values) == SOURCE_SORTED
    assert counting_sort(values) == SOURCE_SORTED
    assert heap_sort(values) == SOURCE_SORTED
    assert values == SOURCE_ARRAY


def test_already_sorted_and_reversed():
    ascending = list(range(300))
    descending = ascending[::-1]
    assert bubble_sort(ascending) == ascending
    assert bubble_sort(descending) == ascending
    assert selection_sort(ascending) == ascending
    assert selection_sort(descending) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(descending) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(descending) == ascending
    assert quick_sort(ascending) == ascending
    assert quick_sort(descending) == ascending
    assert counting_sort(ascending) == ascending
    assert counting_sort(descending) == ascending
    assert heap_sort(ascending) == ascending
    assert heap_sort(descending) == ascending


def test_accepts_any_iterable():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert counting_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert heap_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_comparison_sorts_handle_negatives_and_strings():
    numbers = [5, -3, 0, -3, 9, -10]
    numbers_sorted = [-10, -3, -3, 0, 5, 9]
    words = ["pear", "apple", "fig", "banana"]
    words_sorted = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(numbers) == numbers_sorted
    assert bubble_sort(words) == words_sorted
    assert selection_sort(numbers) == numbers_sorted
    assert selection_sort(words) == words_sorted
    assert insertion_sort(numbers) == numbers_sorted
    assert insertion_sort(words) == words_sorted
    assert merge_sort(numbers) == numbers_sorted
    assert merge_sort(words) == words_sorted
    assert quick_sort(numbers) == numbers_sorted
    assert quick_sort(words) == words_sorted
    assert heap_sort(numbers) == numbers_sorted
    assert heap_sort(words) == words_sorted


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

        def __gt__(self, other):
            return self.key > other.key

    items = [Keyed(1, "a"), Keyed(0, "b"), Keyed(1, "c"), Keyed(0, "d")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]


def test_counting_sort_rejects_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_counting_sort_source_array():
    values = [1, 3, 2, 3, 4, 1, 6, 4, 3]
    assert counting_sort(values) == [1, 1, 2, 3, 3, 3, 4, 4, 6]
"""Bounded binary heaps and heap-based array helpers."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from .sorting import heap_sort

_Order = Callable[[Any, Any], bool]


def _sift_up(heap: list, index: int, before: _Order) -> None:
    while index > 1:
        parent = index // 2
        if not before(heap[index], heap[parent]):
            return
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def _sift_down(heap: list, size: int, index: int, before: _Order) -> None:
    while True:
        best = index
        for child in (2 * index, 2 * index + 1):
            if child <= size and before(heap[child], heap[best]):
                best = child
        if best == index:
            return
        heap[index], heap[best] = heap[best], heap[index]
        index = best


def _checked_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    return capacity


def _push(items: list, capacity: int, value: Any, before: _Order) -> None:
    if len(items) - 1 >= capacity:
        raise OverflowError("heap is full")
    items.append(value)
    _sift_up(items, len(items) - 1, before)


def _pop(items: list, before: _Order) -> Any:
    if len(items) <= 1:
        raise IndexError("pop from an empty heap")
    top = items[1]
    last = items.pop()
    size = len(items) - 1
    if size:
        items[1] = last
        _sift_down(items, size, 1, before)
    return top


class MaxHeap:
    """Bounded heap whose top is its largest item."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list = [None]

    def push(self, value: Any) -> None:
        """Add a value, raising OverflowError when the heap is full."""
        _push(self._items, self.capacity, value, operator.gt)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        return _pop(self._items, operator.gt)

    def __len__(self) -> int:
        return len(self._items) - 1

    def to_list(self) -> list:
        """The items in heap array order."""
        return self._items[1:]

    def __repr__(self) -> str:
        return f"MaxHeap({self.to_list()!r})"


class MinHeap:
    """Bounded heap whose top is its smallest item."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list = [None]

    def push(self, value: Any) -> None:
        """Add a value, raising OverflowError when the heap is full."""
        _push(self._items, self.capacity, value, operator.lt)

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        return _pop(self._items, operator.lt)

    def __len__(self) -> int:
        return len(self._items) - 1

    def to_list(self) -> list:
        """The items in heap array order."""
        return self._items[1:]

    def __repr__(self) -> str:
        return f"MinHeap({self.to_list()!r})"


def _build(values: Iterable[Any], before: _Order) -> list:
    heap = [None, *values]
    size = len(heap) - 1
    for index in range(size // 2, 0, -1):
        _sift_down(heap, size, index, before)
    return heap


def build_max_heap(values: Iterable[Any]) -> list:
    """Arrange values into max-heap array order."""
    return _build(values, operator.gt)[1:]


def build_min_heap(values: Iterable[Any]) -> list:
    """Arrange values into min-heap array order."""
    return _build(values, operator.lt)[1:]


def heap_sort_ascending(values: Iterable[Any]) -> list:
    """Sort ascending using a max-heap."""
    return heap_sort(values)


def heap_sort_descending(values: Iterable[Any]) -> list:
    """Sort descending using a min-heap."""
    heap = _build(values, operator.lt)
    size = len(heap) - 1
    while size > 1:
        heap[1], heap[size] = heap[size], heap[1]
        size -= 1
        _sift_down(heap, size, 1, operator.lt)
    return heap[1:]
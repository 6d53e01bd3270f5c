"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    items = list(values)
    for done in range(1, len(items)):
        swapped = False
        for j in range(len(items) - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining item to the front on each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each item into the already sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    count = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + count
    items[start], items[pivot_index] = items[pivot_index], items[start]
    left, right = start, end
    while left < pivot_index < right:
        while items[left] <= pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left < pivot_index < right:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1
    return pivot_index


def quick_sort(values: Iterable[Any]) -> list:
    """Quick sort that places the first item of each range at its final position."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = _partition(items, start, end)
        pending.append((start, pivot_index - 1))
        pending.append((pivot_index + 1, end))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def _sift_down(heap: list, size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index, 2 * index + 1
        if left <= size and heap[left] > heap[largest]:
            largest = left
        if right <= size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list:
    """Sort ascending with a one-based binary max-heap."""
    heap = [None, *values]
    size = len(heap) - 1
    for index in range(size // 2, 0, -1):
        _sift_down(heap, size, index)
    while size > 1:
        heap[1], heap[size] = heap[size], heap[1]
        size -= 1
        _sift_down(heap, size, 1)
    return heap[1:]
"""Binary-search based lookups over lists and matrices."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of target in sorted nums, or -1 when absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] < target:
            left = mid + 1
        elif nums[mid] > target:
            right = mid - 1
        else:
            return mid
    return -1


def integer_divide(divisor: int, dividend: int) -> int:
    """Largest quotient q in [-dividend, dividend] with q * divisor <= dividend.

    Meant for a positive divisor; returns -1 when the range is empty.
    """
    left, right = -dividend, dividend
    answer = -1
    while left <= right:
        mid = left + (right - left) // 2
        if mid * divisor <= dividend:
            answer = mid
            left = mid + 1
        else:
            right = mid - 1
    return answer


def find_odd_occurrence(values: Sequence[int]) -> int:
    """Index of the lone item in a list where every other item sits in an adjacent pair."""
    if len(values) % 2 == 0:
        raise ValueError("expected an odd number of items")
    left, right = 0, len(values) - 1
    while left < right:
        mid = (left + right) // 2
        if mid % 2 == 1:
            mid -= 1
        if values[mid] == values[mid + 1]:
            left = mid + 2
        else:
            right = mid
    return left


def find_pivot(values: Sequence[int]) -> int:
    """Index of the largest item in a rotated ascending list, or -1 if not rotated."""
    if not values:
        return -1
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if mid + 1 < len(values) and values[mid] > values[mid + 1]:
            return mid
        if mid > 0 and values[mid] < values[mid - 1]:
            return mid - 1
        if values[mid] < values[0]:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def integer_sqrt(x: int) -> int:
    """Floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    start, end = 0, x
    answer = 0
    while start <= end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            answer = mid
            start = mid + 1
        else:
            end = mid - 1
    return answer


def missing_number(nums: Sequence[int]) -> int:
    """The one number of 0..len(nums) that is missing from nums."""
    ordered = sorted(nums)
    start, end = 0, len(ordered) - 1
    answer = len(ordered)
    while start <= end:
        mid = start + (end - start) // 2
        if ordered[mid] == mid:
            start = mid + 1
        else:
            answer = mid
            end = mid - 1
    return answer


def peak_index(values: Sequence[int]) -> int:
    """Index of the peak of a mountain array."""
    if not values:
        raise ValueError("empty sequence has no peak")
    left, right = 0, len(values) - 1
    answer = right
    while left <= right:
        mid = left + (right - left) // 2
        if mid + 1 < len(values) and values[mid] < values[mid + 1]:
            left = mid + 1
        else:
            answer = mid
            right = mid - 1
    return answer


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether target is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = start + (end - start) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return False


def search_nearly_sorted(values: Sequence[int], target: int) -> int:
    """Index of target in a list where each item is at most one place from sorted order, or -1."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        for index in (mid, mid - 1, mid + 1):
            if left <= index <= right and values[index] == target:
                return index
        if values[mid] < target:
            left = mid + 2
        else:
            right = mid - 2
    return -1
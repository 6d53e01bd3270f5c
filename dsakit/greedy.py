"""Greedy exercises."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise


def _largest_gap(limit: int, coordinates: Iterable[int]) -> int:
    points = sorted([0, limit + 1, *coordinates])
    return max(high - low - 1 for low, high in pairwise(points))


def largest_undefended_area(
    width: int, height: int, towers: Iterable[tuple[int, int]]
) -> int:
    """Area of the largest rectangle of cells whose row and column hold no tower."""
    placed = list(towers)
    rows = _largest_gap(width, (x for x, _ in placed))
    cols = _largest_gap(height, (y for _, y in placed))
    return rows * cols
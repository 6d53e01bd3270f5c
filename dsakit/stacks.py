"""Stack exercises on Python lists whose last item is the top."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any

_OPERATORS = "+-*/"


def is_sorted_stack(stack: Sequence[Any]) -> bool:
    """True when values never decrease going from the top to the bottom."""
    return all(upper <= lower for lower, upper in pairwise(stack))


def middle_of_stack(stack: Sequence[Any]) -> Any:
    """The item len(stack) // 2 places below the top."""
    if not stack:
        raise IndexError("empty stack has no middle")
    return stack[-1 - len(stack) // 2]


def insert_at_bottom(stack: list, value: Any) -> None:
    """Put value underneath every item already on the stack."""
    stack.insert(0, value)


def next_smaller(values: Iterable[int]) -> list[int]:
    """For each item, the nearest smaller item to its right, or -1."""
    items = list(values)
    answer = []
    pending: list[int] = []
    for value in reversed(items):
        while pending and pending[-1] >= value:
            pending.pop()
        answer.append(pending[-1] if pending else -1)
        pending.append(value)
    answer.reverse()
    return answer


def previous_smaller(values: Iterable[int]) -> list[int]:
    """For each item, the nearest smaller item to its left, or -1."""
    answer = []
    pending: list[int] = []
    for value in values:
        while pending and pending[-1] >= value:
            pending.pop()
        answer.append(pending[-1] if pending else -1)
        pending.append(value)
    return answer


def count_redundant_brackets(expression: str) -> int:
    """Number of bracket pairs that enclose no arithmetic operator directly."""
    pending: list[str] = []
    redundant = 0
    for char in expression:
        if char == "(" or char in _OPERATORS:
            pending.append(char)
        elif char == ")":
            operators = 0
            while pending and pending[-1] != "(":
                pending.pop()
                operators += 1
            if not pending:
                raise ValueError("unbalanced closing bracket")
            pending.pop()
            if operators == 0:
                redundant += 1
    return redundant


def reverse_string(text: str) -> str:
    """The characters of text in reverse order."""
    return "".join(reversed(text))


def reverse_stack(stack: list) -> None:
    """Reverse the stack in place."""
    stack.reverse()


def sorted_insert(stack: list, value: Any) -> None:
    """Insert value just above the topmost item that is not greater than it."""
    index = len(stack)
    while index > 0 and stack[index - 1] > value:
        index -= 1
    stack.insert(index, value)
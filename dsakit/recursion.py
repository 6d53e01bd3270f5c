"""Recursion exercises on numbers and strings."""

from __future__ import annotations

from itertools import product


def count_decodings(text: str) -> int:
    """Number of ways to read a digit string as letters where 1..26 map to A..Z."""
    if not text or text[0] == "0":
        return 0
    if not text.isdigit():
        raise ValueError("only digit strings can be decoded")
    after_next, after = 1, 1
    for index in reversed(range(len(text))):
        if text[index] == "0":
            current = 0
        else:
            current = after
            if index + 1 < len(text) and 10 <= int(text[index : index + 2]) <= 26:
                current += after_next
        after_next, after = after, current
    return after


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("expected a non-negative integer")


def factorial(n: int) -> int:
    """n! for a non-negative integer n."""
    _require_non_negative(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def power_of_two(n: int) -> int:
    """2 raised to a non-negative integer n."""
    _require_non_negative(n)
    return 1 << n


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sum_to(n: int) -> int:
    """Sum of the integers 1 through n."""
    _require_non_negative(n)
    return n * (n + 1) // 2


def count_up(n: int) -> list[int]:
    """The integers 1 through n in ascending order."""
    return list(range(1, n + 1))


def last_occurrence(text: str, target: str) -> int:
    """Index of the last occurrence of target in text, or -1."""
    return text.rfind(target)


def is_palindrome(text: str) -> bool:
    """True when text reads the same in both directions."""
    return text == text[::-1]


def remove_all(text: str, part: str) -> str:
    """Repeatedly remove the first occurrence of part until none is left."""
    if not part:
        raise ValueError("the part to remove must not be empty")
    while (found := text.find(part)) != -1:
        text = text[:found] + text[found + len(part) :]
    return text


def reverse(text: str) -> str:
    """The characters of text in reverse order."""
    return text[::-1]


def substrings(text: str) -> list[str]:
    """Every non-empty substring, grouped by start index and growing in length."""
    return [
        text[start:end]
        for start in range(len(text))
        for end in range(start + 1, len(text) + 1)
    ]


def subsequences(text: str) -> list[str]:
    """Every subsequence, choosing to keep each character before dropping it."""
    return [
        "".join(char for char, keep in zip(text, mask) if keep)
        for mask in product((True, False), repeat=len(text))
    ]
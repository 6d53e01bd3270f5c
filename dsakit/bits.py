"""Small bit-manipulation helpers on integers."""

from __future__ import annotations


def is_power_of_two(n: int) -> bool:
    """True when n has at most one set bit (the n & (n - 1) test, so zero passes too)."""
    return n & (n - 1) == 0


def is_even(n: int) -> bool:
    """True when the lowest bit of n is clear."""
    return n & 1 == 0


def clear_bits_in_range(n: int, i: int, j: int) -> int:
    """Clear bits j through i (inclusive, zero-based, i >= j)."""
    high = -1 << (i + 1)
    low = ~(-1 << j)
    return n & (high | low)


def clear_bit(n: int, i: int) -> int:
    """Clear the zero-based bit i."""
    return n & ~(1 << i)


def clear_bits_through(n: int, i: int) -> int:
    """Clear bits 0 through i (inclusive)."""
    return n & (-1 << (i + 1))


def count_set_bits(n: int) -> int:
    """Number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("count_set_bits needs a non-negative integer")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def get_bit(n: int, position: int) -> int:
    """Bit of n at a one-based position, as 0 or 1."""
    if position < 1:
        raise ValueError("bit positions start at 1")
    return 0 if n & (1 << (position - 1)) == 0 else 1


def xor_upto(n: int) -> int:
    """XOR of all integers from 1 to n."""
    remainder = n % 4
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    if remainder == 3:
        return 0
    return n


def xor_prefixes(n: int) -> list[int]:
    """xor_upto(i) for every i from 1 to n."""
    return [xor_upto(i) for i in range(1, n + 1)]


def set_bit(n: int, i: int) -> int:
    """Set the zero-based bit i."""
    return n | (1 << i)


def set_bit_to(n: int, i: int, target: int) -> int:
    """Clear bit i, then set it again unless target is 0."""
    n = clear_bit(n, i)
    return n if target == 0 else set_bit(n, i)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three XORs."""
    a ^= b
    b ^= a
    a ^= b
    return a, b
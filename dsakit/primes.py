"""Sieve of Eratosthenes."""

from __future__ import annotations


def sieve(n: int) -> list[bool]:
    """Primality flags for every integer in 0..n-1."""
    if n < 0:
        raise ValueError("sieve size must be non-negative")
    flags = [True] * n
    for index in range(min(n, 2)):
        flags[index] = False
    i = 2
    while i * i < n:
        if flags[i]:
            for multiple in range(i * i, n, i):
                flags[multiple] = False
        i += 1
    return flags


def primes_below(n: int) -> list[int]:
    """All primes smaller than n, ascending."""
    return [number for number, prime in enumerate(sieve(n)) if prime]
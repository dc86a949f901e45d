"""Introductory problem-set solutions: arrays, permutations, sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_BASES = "ACGT"


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the total increments needed to make the array non-decreasing."""
    moves = 0
    current: int | None = None
    for value in values:
        if current is not None and current > value:
            moves += current - value
        else:
            current = value
    return moves


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Raises ValueError when no such permutation exists.
    """
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    descending = range(n, 0, -1)
    odds = [i for i in descending if i % 2 != 0]
    evens = [i for i in descending if i % 2 == 0]
    return odds + evens


def longest_repetition(s: str) -> int:
    """Return one more than the largest count of adjacent equal pairs of a base.

    Pairs of the same base are counted over the whole string, whether or not
    they belong to the same run.
    """
    pairs = Counter(a for a, b in zip(s, s[1:]) if a == b and a in _BASES)
    return 1 + max(pairs[base] for base in _BASES)


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence from n down to 1 by halving or tripling plus one."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else n * 3 + 1
        sequence.append(n)
    return sequence
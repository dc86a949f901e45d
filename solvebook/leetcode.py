"""Solutions to interview-style string and number problems."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import zip_longest

_VOWELS = frozenset("aeiouAEIOU")
_DIGITS = frozenset("0123456789")


def is_vowel(ch: str) -> bool:
    """Return True when ch is an English vowel of either case."""
    return ch in _VOWELS


def minimum_moves(s: str) -> int:
    """Return the moves needed to turn every 'X' into 'O', three cells a move."""
    moves = 0
    cells = iter(s)
    for cell in cells:
        if cell == "X":
            moves += 1
            next(cells, None)
            next(cells, None)
    return moves


def sort_vowels(s: str) -> str:
    """Return s with its vowels sorted in place by character code."""
    vowels = iter(sorted(ch for ch in s if is_vowel(ch)))
    return "".join(next(vowels) if is_vowel(ch) else ch for ch in s)


def reverse_vowels(s: str) -> str:
    """Return s with the order of its vowels reversed."""
    vowels = reversed([ch for ch in s if is_vowel(ch)])
    return "".join(next(vowels) if is_vowel(ch) else ch for ch in s)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target, or where it would be inserted."""
    return next(
        (index for index, value in enumerate(nums) if value >= target), len(nums)
    )


def add_strings(num1: str, num2: str) -> str:
    """Return the decimal sum of two non-negative numbers given as strings."""
    if not set(num1 + num2) <= _DIGITS:
        raise ValueError("both numbers must consist of decimal digits")
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def my_sqrt(x: int) -> int:
    """Return the integer square root of x, rounded down."""
    if x < 2:
        return x
    return math.isqrt(x)


def reverse_string(name: str) -> str:
    """Return name written backwards."""
    return name[::-1]
"""Contest solutions that work on strings and characters."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import product
from string import ascii_lowercase

_HQ9_COMMANDS = frozenset("HQ9")
_CODEFORCES = "codeforces"


def make_it_white(cells: Iterable[str]) -> int:
    """Return the length of the shortest segment covering every 'B' cell."""
    positions = [index for index, cell in enumerate(cells) if cell == "B"]
    if not positions:
        return 0
    return positions[-1] - positions[0] + 1


def smallest_word(n: int) -> str:
    """Return the smallest three-letter word whose letter positions sum to n.

    Letters are numbered from 'a' = 1 to 'z' = 26.
    """
    for letters in product(ascii_lowercase, repeat=3):
        if sum(ascii_lowercase.index(letter) + 1 for letter in letters) == n:
            return "".join(letters)
    raise ValueError(f"no three-letter word has letter sum {n}")


def fix_expression(s: str) -> str:
    """Return the expression with its middle sign made true for its two digits."""
    if len(s) < 3:
        raise ValueError("expression must have three characters")
    a, b = s[0], s[2]
    if a < b:
        sign = "<"
    elif a == b:
        sign = "="
    else:
        sign = ">"
    return f"{a}{sign}{b}"


def chewbacca_number(num: str) -> str:
    """Return the smallest number reachable by inverting digits (d -> 9 - d).

    A leading 9 is kept so that the result never starts with zero.
    """
    digits = []
    for index, digit in enumerate(num):
        if "5" <= digit <= "9" and not (index == 0 and digit == "9"):
            digit = str(9 - int(digit))
        digits.append(digit)
    return "".join(digits)


def is_good_string(s: str) -> bool:
    """Return True when the first and last characters differ."""
    if not s:
        raise ValueError("string must not be empty")
    return s[0] != s[-1]


def is_dangerous(situation: str) -> bool:
    """Return True when seven or more players of one team stand in a row."""
    return "0" * 7 in situation or "1" * 7 in situation


def hq9_outputs(program: str) -> bool:
    """Return True when the HQ9+ program produces any output."""
    return any(ch in _HQ9_COMMANDS for ch in program)


def is_translation(s: str, t: str) -> bool:
    """Return True when t is s written backwards."""
    return s[::-1] == t


def word_on_paper(grid: Iterable[str]) -> str:
    """Return the letters of the grid read row by row, skipping dots."""
    return "".join(ch for row in grid for ch in row if ch != ".")


def fix_caps_lock(s: str) -> str:
    """Return the word with its case swapped if it was typed with Caps Lock on."""
    if not s:
        return s
    rest_has_lower = any(ch.islower() for ch in s[1:])
    if s[0].islower() and not rest_has_lower:
        return s[0].upper() + s[1:].lower()
    if all(ch.isupper() for ch in s):
        return s.lower()
    return s


def in_codeforces(ch: str) -> bool:
    """Return True when the single character occurs in 'codeforces'."""
    if len(ch) != 1:
        raise ValueError("a single character is required")
    return ch in _CODEFORCES


def undub(s: str) -> str:
    """Return the song with every 'WUB' replaced by a space."""
    return s.replace("WUB", " ")


def image_operations(s1: str, s2: str) -> int:
    """Return the number of distinct characters in both strings, less one."""
    return len(set(s1) | set(s2)) - 1


def stones_to_remove(stones: str) -> int:
    """Return how many stones to remove so no neighbours share a colour."""
    return sum(1 for a, b in zip(stones, stones[1:]) if a == b)


def fix_word_case(s: str) -> str:
    """Return the word all upper case if most letters are, otherwise lower."""
    upper = sum(1 for ch in s if "A" <= ch <= "Z")
    lower = sum(1 for ch in s if "a" <= ch <= "z")
    return s.upper() if upper > lower else s.lower()
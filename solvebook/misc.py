"""Small standalone exercises: binary strings, a bank of vectors, sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_imbalance(s: str) -> bool:
    """Return True when the binary string holds at least one '0'."""
    return "0" in s


class VectorBank:
    """A fixed number of integer lists addressed by index."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of vectors must be non-negative")
        self._vectors: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._vectors)

    def _vector(self, t: int) -> list[int]:
        if not 0 <= t < len(self._vectors):
            raise IndexError(f"vector index {t} out of range")
        return self._vectors[t]

    def push(self, t: int, x: int) -> None:
        """Append x to vector t."""
        self._vector(t).append(x)

    def dump(self, t: int) -> list[int]:
        """Return a copy of the elements of vector t in insertion order."""
        return list(self._vector(t))

    def clear(self, t: int) -> None:
        """Remove every element of vector t."""
        self._vector(t).clear()


def run_vector_queries(n: int, queries: Iterable[Sequence[int]]) -> list[str]:
    """Apply queries to n vectors and return the lines printed by dump queries.

    A query is (0, t, x) to push, (1, t) to dump, and any other kind clears t.
    """
    bank = VectorBank(n)
    lines: list[str] = []
    for kind, t, *rest in queries:
        if kind == 0:
            bank.push(t, rest[0])
        elif kind == 1:
            lines.append(" ".join(str(value) for value in bank.dump(t)))
        else:
            bank.clear(t)
    return lines


def welcome(a: int, b: int, c: int, s: str) -> str:
    """Return the sum of the three numbers followed by the string."""
    return f"{a + b + c} {s}"
"""Contest solutions that work on numbers and arrays of numbers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

_PROBLEM_LEVELS = "ABCDEFG"


def burger_profit(b: int, p: int, f: int, h: int, c: int) -> int:
    """Return the best profit from b buns, p beef patties and f cutlets.

    Each burger takes two buns; hamburgers sell for h, chicken burgers for c.
    """
    pairs = b // 2
    if c >= h:
        chicken = min(pairs, f)
        beef = min(pairs - chicken, p)
    else:
        beef = min(pairs, p)
        chicken = min(pairs - beef, f)
    return chicken * c + beef * h


def elephant_steps(x: int) -> int:
    """Return the fewest moves of length 1 to 5 that cover distance x."""
    steps = 0
    for length in (5, 4, 3, 2, 1):
        moves, x = divmod(x, length)
        steps += moves
    return steps


def absolute_sum(values: Iterable[int]) -> int:
    """Return the sum of the absolute values."""
    return sum(abs(value) for value in values)


def contains_value(values: Iterable[int], k: int) -> bool:
    """Return True when k occurs among the values."""
    return k in values


def odd_one_out(a: int, b: int, c: int) -> int:
    """Return the value that differs from the other two equal ones."""
    if a == b:
        return c
    if b == c:
        return a
    if a == c:
        return b
    raise ValueError("no two of the values are equal")


def can_color_array(values: Sequence[int]) -> bool:
    """Return True when the array splits into two colours of equal sum parity."""
    if len(values) < 2:
        raise ValueError("need at least two values")
    if len(values) == 2:
        first, second = values[0], values[1]
    else:
        first, second = values[0] + values[1], sum(values[2:])
    return first % 2 == second % 2


def min_moves_divisible_by_three(values: Sequence[int]) -> int:
    """Return the moves needed to make the sum divisible by three.

    A move either removes one element or adds one to an element.
    """
    total = sum(values)
    remainder = total % 3
    if remainder == 0:
        return 0
    if remainder == 2:
        return 1
    if any((total - value) % 3 == 0 for value in values):
        return 1
    return 2


def restore_three_numbers(values: Sequence[int]) -> list[int]:
    """Recover a, b, c from a+b, a+c, b+c and a+b+c in any order."""
    if len(values) != 4:
        raise ValueError("exactly four values are required")
    *smaller, largest = sorted(values)
    return [largest - value for value in smaller]


def spy_index(values: Sequence[int]) -> int:
    """Return the 1-based position of the single value that differs."""
    def at(index: int) -> int | None:
        return values[index] if index < len(values) else None

    for i in range(len(values) - 1):
        if values[i] != values[i + 1]:
            return i + 2 if values[i + 1] != at(i + 2) else i + 1
    raise ValueError("no differing value")


def problems_to_create(problems: str, m: int) -> int:
    """Return how many problems must be added so each level A-G has m."""
    counts = Counter(problems)
    return sum(max(0, m - counts[level]) for level in _PROBLEM_LEVELS)


def robin_gives(values: Iterable[int], k: int) -> int:
    """Return how many people with nothing receive gold while walking the list."""
    gold = 0
    given = 0
    for amount in values:
        if amount >= k:
            gold += amount
        elif amount == 0 and gold > 0:
            given += 1
            gold -= 1
    return given


def bus_boarding(events: Iterable[tuple[str, int]]) -> list[bool]:
    """Return, for every bus event, whether the watcher can board.

    Events are ('P', people) arrivals and ('B', seats) buses.
    """
    people = 0
    seats = 0
    answers: list[bool] = []
    for kind, amount in events:
        if kind == "P":
            people += amount
        elif kind == "B":
            seats += amount
            if seats > people:
                answers.append(True)
                people = 0
            elif people > seats:
                answers.append(False)
                people -= seats
            else:
                answers.append(False)
                people = 0
            seats = 0
    return answers


def twice_score(values: Iterable[int]) -> int:
    """Return how many disjoint pairs of equal values can be formed."""
    return sum(count // 2 for count in Counter(values).values())


def gift_givers(p: Sequence[int]) -> list[int]:
    """Return, for each friend 1..n, who gave them a gift (1-based)."""
    givers: list[int] = []
    for receiver in range(1, len(p) + 1):
        givers.extend(
            giver for giver, target in enumerate(p, start=1) if target == receiver
        )
    return givers


def ten_words_winner(responses: Iterable[tuple[int, int]]) -> int | None:
    """Return the 1-based index of the best response of at most ten words.

    Responses are (words, quality) pairs; None when none qualifies.
    """
    winner: int | None = None
    best_quality = -1
    for index, (words, quality) in enumerate(responses, start=1):
        if words <= 10 and quality > best_quality:
            winner = index
            best_quality = quality
    return winner


def to_my_critics(a: int, b: int, c: int) -> bool:
    """Return True when some two of the digits sum to at least ten."""
    return a + b >= 10 or a + c >= 10 or b + c >= 10


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Return how many of dragons 1..d are hit by any of the four divisors."""
    divisors = (k, l, m, n)
    return sum(
        1 for i in range(1, d + 1) if any(i % divisor == 0 for divisor in divisors)
    )


def key_races(s: int, v1: int, v2: int, t1: int, t2: int) -> str:
    """Return the typing race outcome: 'First', 'Second' or 'Friendship'."""
    first = v1 * s + 2 * t1
    second = v2 * s + 2 * t2
    if first == second:
        return "Friendship"
    return "First" if first < second else "Second"


def maximise_score(values: Iterable[int]) -> int:
    """Return the best sum of pair minimums when the values are paired up."""
    heap = list(values)
    if len(heap) % 2:
        raise ValueError("an even number of values is required")
    heapq.heapify(heap)
    score = 0
    while heap:
        x = heapq.heappop(heap)
        y = heapq.heappop(heap)
        score += min(x, y)
    return score


def next_round_count(scores: Sequence[int], k: int) -> int:
    """Return how many positive scores reach the k-th place score."""
    if not 1 <= k <= len(scores):
        raise IndexError(f"place {k} out of range")
    threshold = scores[k - 1]
    count = 0
    for score in scores:
        if score == 0:
            break
        if score >= threshold:
            count += 1
    return count


def frying_time(n: int, k: int) -> int:
    """Return the minutes needed to fry n steaks k at a time."""
    return max(10, (n + k - 1) // k * 5)


def watermelon(w: int) -> bool:
    """Return True when weight w splits into two even parts."""
    return w % 2 == 0 and w != 2


def again_25() -> int:
    """Return the last two digits of any power of five above the first."""
    return 25
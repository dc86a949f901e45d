import pytest

from solvebook.codeforces_numbers import (
    absolute_sum,
    again_25,
    burger_profit,
    bus_boarding,
    can_color_array,
    contains_value,
    damaged_dragons,
    elephant_steps,
    frying_time,
    gift_givers,
    key_races,
    maximise_score,
    min_moves_divisible_by_three,
    next_round_count,
    odd_one_out,
    problems_to_create,
    restore_three_numbers,
    robin_gives,
    spy_index,
    ten_words_winner,
    to_my_critics,
    twice_score,
    watermelon,
)


@pytest.mark.parametrize(
    "args, expected",
    [((15, 2, 3, 5, 10), 40), ((7, 5, 2, 10, 12), 34), ((1, 100, 100, 100, 100), 0)],
)
def test_burger_profit_samples(args, expected):
    assert burger_profit(*args) == expected


def test_burger_profit_only_beef():
    assert burger_profit(20, 3, 0, 7, 100) == 3 * 7


@pytest.mark.parametrize("k", [1, 2, 9, 40])
def test_elephant_steps_multiples_of_five(k):
    assert elephant_steps(5 * k) == k
    for extra in range(1, 5):
        assert elephant_steps(5 * k + extra) == k + 1


def test_absolute_sum_ignores_sign():
    values = [3, -7, 0, 12, -1]
    assert absolute_sum(values) == absolute_sum([-v for v in values])
    assert absolute_sum([-5]) == 5


def test_contains_value():
    assert contains_value([4, 8, 15], 8)
    assert not contains_value([4, 8, 15], 16)


@pytest.mark.parametrize("a, b, c, odd", [(1, 2, 2, 1), (4, 3, 4, 3), (5, 5, 6, 6)])
def test_odd_one_out(a, b, c, odd):
    assert odd_one_out(a, b, c) == odd


def test_odd_one_out_all_distinct():
    with pytest.raises(ValueError):
        odd_one_out(1, 2, 3)


def test_can_color_array():
    assert can_color_array([1, 3])
    assert not can_color_array([1, 2])
    assert can_color_array([1, 1, 2, 4])
    assert not can_color_array([1, 2, 3, 3])


def test_can_color_array_too_short():
    with pytest.raises(ValueError):
        can_color_array([5])


def test_min_moves_divisible_by_three():
    assert min_moves_divisible_by_three([3, 6]) == 0
    assert min_moves_divisible_by_three([1, 1]) == 1
    assert min_moves_divisible_by_three([1, 3]) == 1
    assert min_moves_divisible_by_three([2, 2]) == 2


@pytest.mark.parametrize("a, b, c", [(1, 2, 3), (40, 40, 40), (2, 7, 100)])
def test_restore_three_numbers_round_trip(a, b, c):
    sums = [a + b + c, b + c, a + b, a + c]
    assert sorted(restore_three_numbers(sums)) == sorted([a, b, c])


def test_restore_three_numbers_wrong_length():
    with pytest.raises(ValueError):
        restore_three_numbers([1, 2, 3])


@pytest.mark.parametrize("n", [3, 4, 6])
def test_spy_index_every_position(n):
    for position in range(n):
        values = [7] * n
        values[position] = 9
        assert spy_index(values) == position + 1


def test_spy_index_no_spy():
    with pytest.raises(ValueError):
        spy_index([4, 4, 4])


def test_problems_to_create_samples():
    assert problems_to_create("BGECDCBDED", 1) == 2
    assert problems_to_create("BGECDCBDED", 2) == 5


@pytest.mark.parametrize("m", [1, 3])
def test_problems_to_create_complete_set(m):
    assert problems_to_create("ABCDEFG" * m, m) == 0


def test_robin_gives():
    assert robin_gives([2, 0], 2) == 1
    assert robin_gives([1, 0, 0], 5) == 0


def test_bus_boarding_sample():
    events = [
        ("P", 2), ("P", 5), ("B", 8), ("P", 14), ("B", 5),
        ("B", 9), ("B", 3), ("P", 2), ("B", 1), ("B", 2),
    ]
    assert bus_boarding(events) == [True, False, False, True, False, True]


def test_bus_boarding_answers_each_bus():
    events = [("B", 1), ("P", 3), ("B", 2), ("B", 2)]
    answers = bus_boarding(events)
    assert len(answers) == sum(1 for kind, _ in events if kind == "B")
    assert answers[0]


def test_twice_score():
    distinct = [1, 2, 3, 4]
    assert twice_score(distinct) == 0
    assert twice_score(distinct + distinct) == len(distinct)


@pytest.mark.parametrize("p", [[2, 3, 4, 1], [1, 3, 2], [1], [4, 1, 3, 2, 5]])
def test_gift_givers_is_inverse(p):
    givers = gift_givers(p)
    assert gift_givers(givers) == p
    assert all(p[giver - 1] == receiver for receiver, giver in enumerate(givers, 1))


def test_ten_words_winner_picks_best_short_response():
    responses = [(7, 2), (12, 5), (9, 3), (9, 4), (10, 1)]
    winner = ten_words_winner(responses)
    words, quality = responses[winner - 1]
    assert words <= 10
    assert quality == max(q for w, q in responses if w <= 10)


def test_ten_words_winner_none_qualify():
    assert ten_words_winner([(11, 5), (20, 9)]) is None


def test_to_my_critics():
    assert to_my_critics(8, 1, 2)
    assert not to_my_critics(1, 2, 3)


def test_damaged_dragons():
    assert damaged_dragons(1, 2, 3, 4, 12) == 12
    assert damaged_dragons(2, 3, 4, 5, 24) == 17


@pytest.mark.parametrize(
    "args, expected",
    [((5, 1, 2, 1, 2), "First"), ((3, 3, 1, 1, 1), "Second"), ((4, 5, 3, 1, 5), "Friendship")],
)
def test_key_races(args, expected):
    assert key_races(*args) == expected


def test_maximise_score():
    assert maximise_score([2, 3]) == 2
    pairs = [1, 6, 6, 9]
    assert maximise_score(pairs + pairs) == sum(pairs)


def test_maximise_score_odd_count():
    with pytest.raises(ValueError):
        maximise_score([1, 2, 3])


def test_next_round_count():
    assert next_round_count([10, 9, 8, 7, 7, 7, 5, 5], 5) == 6
    assert next_round_count([0, 0, 0, 0], 2) == 0
    assert next_round_count([3, 3, 3], 3) == 3


def test_next_round_count_bad_place():
    with pytest.raises(IndexError):
        next_round_count([1, 2], 3)


def test_frying_time():
    assert frying_time(1, 5) == 10
    for rounds in (2, 3, 7):
        assert frying_time(4 * rounds, 4) == 5 * rounds


def test_watermelon():
    assert watermelon(8)
    assert not watermelon(2)
    assert not watermelon(7)


def test_again_25():
    assert again_25() == 25
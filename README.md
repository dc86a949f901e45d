# solvebook

A collection of solutions to well-known programming-contest problems.
Each solution is an ordinary Python function that takes the problem's
input as arguments and returns its answer.

## Installation

```
pip install solvebook
```

## Modules

- `solvebook.misc`: `binary_imbalance`, a fixed set of integer lists
  (`VectorBank` with `push`, `dump` and `clear`), `run_vector_queries`,
  which applies a list of queries and returns the lines that dump
  queries would print, and the warm-up `welcome`.
- `solvebook.cses`: `increasing_array_moves`, `beautiful_permutation`,
  `longest_repetition`, `weird_algorithm`.
- `solvebook.codeforces_numbers`: number and array problems:
  `burger_profit`, `elephant_steps`, `absolute_sum`, `contains_value`,
  `odd_one_out`, `can_color_array`, `min_moves_divisible_by_three`,
  `restore_three_numbers`, `spy_index`, `problems_to_create`,
  `robin_gives`, `bus_boarding`, `twice_score`, `gift_givers`,
  `ten_words_winner`, `to_my_critics`, `damaged_dragons`, `key_races`,
  `maximise_score`, `next_round_count`, `frying_time`, `watermelon`,
  `again_25`.
- `solvebook.codeforces_strings`: string problems: `make_it_white`,
  `smallest_word`, `fix_expression`, `chewbacca_number`,
  `is_good_string`, `is_dangerous`, `hq9_outputs`, `is_translation`,
  `word_on_paper`, `fix_caps_lock`, `in_codeforces`, `undub`,
  `image_operations`, `stones_to_remove`, `fix_word_case`.
- `solvebook.leetcode`: `is_vowel`, `minimum_moves`, `sort_vowels`,
  `reverse_vowels`, `search_insert`, `add_strings`, `my_sqrt`,
  `reverse_string`.

## Example

```python
from solvebook.cses import weird_algorithm
from solvebook.leetcode import add_strings, sort_vowels
from solvebook.codeforces_numbers import watermelon

print(weird_algorithm(3))          # [3, 10, 5, 16, 8, 4, 2, 1]
print(add_strings("456", "77"))    # "533"
print(sort_vowels("lEetcOde"))     # "lEOtcede"
print(watermelon(8))               # True
```

Functions that answer a yes/no question return a `bool`. Where a problem
has no valid answer or the input does not fit it, a `ValueError` is
raised (for example `beautiful_permutation(2)`); an index out of range,
as in `VectorBank` or `next_round_count`, raises `IndexError`.
`ten_words_winner` returns `None` when no response qualifies.

## What it does not do

The package is a library only. It has no command-line program and does
not read problem input from standard input or write judge-formatted
output; callers pass the parsed values to the functions directly.

## Running the tests

```
pip install "solvebook[test]"
pytest
```
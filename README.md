# contestkit

A small library of solutions to well-known competitive-programming problems,
together with the number-theory helpers they rely on. Every solution is a plain
function: it takes Python values and returns Python values, so it can be used
from code, from tests or from an interactive session. A `contestkit` command
runs any of the solutions on problem input read from standard input.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestkit.numtheory` | `gcd`, `expo`, `extended_gcd`, `mod_inverse`, `mod_inverse_prime`, `sieve`, `mod_add`, `mod_mul`, `mod_sub`, `mod_div`, `phi`, `combination`, `prime_factors`, `common_step` |
| `contestkit.oddities` | `is_largest_154`, `to_24_hour` |
| `contestkit.sequences` | `min_transformation_ops`, `has_similar_pairing`, `min_stable_groups`, `first_three_sum_plus_two` |
| `contestkit.pairs` | `ternary_xor_split`, `arrays_can_match`, `max_team_size`, `repeated_words`, `restore_progression` |
| `contestkit.greedy` | `count_typable_substrings`, `card_deck_positions`, `arrange_cheap_spheres`, `min_score_after_operations` |
| `contestkit.games` | `recover_array`, `even_odd_winner`, `count_same_differences` |
| `contestkit.constructive` | `minimize_by_deque`, `fill_grid`, `build_binary_string` |
| `contestkit.cli` | `main`, the entry point of the `contestkit` command |

## Examples

```python
from contestkit.numtheory import gcd, prime_factors
from contestkit.constructive import minimize_by_deque
from contestkit.oddities import to_24_hour

gcd(12, 18)                     # 6
prime_factors(12)               # [2, 2, 3]
minimize_by_deque([3, 1, 2, 4]) # [1, 3, 2, 4]
to_24_hour(7, ":05:45PM")       # "19:05:45"
```

Functions raise `ValueError` on input they cannot handle instead of returning
a status code; `recover_array` returns `None` when no hidden array fits.

## Command line

The `contestkit` command takes the name of a problem, reads that problem's
input from standard input in the usual contest format (whitespace-separated
tokens, most problems starting with the number of test cases) and prints one
answer per line:

```
contestkit deque < input.txt
echo "07:05:45PM" | contestkit time
```

The problem names are:

`all-are-same`, `array-operations`, `array-restoration`, `binary-string`,
`broken-keyboard`, `card-deck`, `check154`, `corrupted-array`, `deque`,
`even-odd-game`, `factorize`, `grid-fill`, `hello`, `occurrences`,
`sages-birthday`, `same-differences`, `sequence-transformation`,
`similar-pairs`, `stable-groups`, `sum-of-cubes`, `ternary-xor`, `time`,
`two-arrays`, `two-teams`, `unique-number`.

`contestkit --help` lists them as well. Malformed input makes the command
print a message prefixed with `contestkit:` to standard error and exit with
status 1.

## Limitations

The `occurrences` problem has no solution: its command reads the number of
test cases and prints nothing. `hello` ignores its input and prints
`hello world`.
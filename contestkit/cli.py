"""Command-line runner that reads a problem's input from stdin and prints answers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

from contestkit.constructive import build_binary_string, fill_grid, minimize_by_deque
from contestkit.games import count_same_differences, even_odd_winner, recover_array
from contestkit.greedy import (
    arrange_cheap_spheres,
    card_deck_positions,
    count_typable_substrings,
    min_score_after_operations,
)
from contestkit.numtheory import common_step, prime_factors
from contestkit.oddities import is_largest_154, to_24_hour
from contestkit.pairs import (
    arrays_can_match,
    max_team_size,
    repeated_words,
    restore_progression,
    ternary_xor_split,
)
from contestkit.sequences import (
    first_three_sum_plus_two,
    has_similar_pairing,
    min_stable_groups,
    min_transformation_ops,
)

Handler = Callable[[str], Iterable[str]]
_PROBLEMS: dict[str, Handler] = {}


def _problem(name: str) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


class _Reader:
    """Whitespace-separated token reader over the whole input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.number() for _ in range(count)]

    def cases(self) -> range:
        count = self.number()
        if count < 0:
            raise ValueError(f"number of test cases must not be negative, got {count}")
        return range(count)


def _join(values: Iterable[int]) -> str:
    return " ".join(map(str, values))


@_problem("hello")
def _hello(text: str) -> Iterator[str]:
    yield "hello world"


@_problem("occurrences")
def _occurrences(text: str) -> Iterator[str]:
    _Reader(text).cases()
    yield from ()


@_problem("all-are-same")
def _all_are_same(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield str(common_step(reader.numbers(reader.number())))


@_problem("factorize")
def _factorize(text: str) -> Iterator[str]:
    factors = prime_factors(_Reader(text).number())
    if factors:
        yield _join(factors)


@_problem("check154")
def _check154(text: str) -> Iterator[str]:
    reader = _Reader(text)
    values = reader.numbers(reader.number())
    yield "true" if is_largest_154(values) else "false"


@_problem("time")
def _time(text: str) -> Iterator[str]:
    match = re.match(r"\s*(\d+)(\S*)", text)
    if match is None:
        raise ValueError("expected a time such as 07:05:45PM")
    yield to_24_hour(int(match.group(1)), match.group(2))


@_problem("sequence-transformation")
def _sequence_transformation(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield str(min_transformation_ops(reader.numbers(reader.number())))


@_problem("similar-pairs")
def _similar_pairs(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield "YES" if has_similar_pairing(reader.numbers(reader.number())) else "NO"


@_problem("stable-groups")
def _stable_groups(text: str) -> Iterator[str]:
    reader = _Reader(text)
    n, k, x = reader.numbers(3)
    yield str(min_stable_groups(reader.numbers(n), k, x))


@_problem("sum-of-cubes")
def _sum_of_cubes(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield str(first_three_sum_plus_two(reader.numbers(reader.number())))


@_problem("ternary-xor")
def _ternary_xor(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        reader.number()
        yield from ternary_xor_split(reader.word())


@_problem("two-arrays")
def _two_arrays(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        n = reader.number()
        a = reader.numbers(n)
        b = reader.numbers(n)
        yield "YES" if arrays_can_match(a, b) else "NO"


@_problem("two-teams")
def _two_teams(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield str(max_team_size(reader.numbers(reader.number())))


@_problem("unique-number")
def _unique_number(text: str) -> Iterator[str]:
    first_line = text.split("\n", 1)[0]
    for word, count in repeated_words(first_line):
        yield f"{word} {count}"


@_problem("array-restoration")
def _array_restoration(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        n, a, b = reader.numbers(3)
        yield _join(restore_progression(n, a, b))


@_problem("broken-keyboard")
def _broken_keyboard(text: str) -> Iterator[str]:
    reader = _Reader(text)
    _, m = reader.numbers(2)
    line = reader.word()
    keys = [reader.word() for _ in range(m)]
    yield str(count_typable_substrings(line, keys))


@_problem("card-deck")
def _card_deck(text: str) -> Iterator[str]:
    reader = _Reader(text)
    n, q = reader.numbers(2)
    deck = reader.numbers(n)
    queries = reader.numbers(q)
    yield _join(card_deck_positions(deck, queries))


@_problem("sages-birthday")
def _sages_birthday(text: str) -> Iterator[str]:
    reader = _Reader(text)
    cheap, arrangement = arrange_cheap_spheres(reader.numbers(reader.number()))
    yield str(cheap)
    yield _join(arrangement)


@_problem("array-operations")
def _array_operations(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        n, k = reader.numbers(2)
        yield str(min_score_after_operations(reader.numbers(n), k))


@_problem("corrupted-array")
def _corrupted_array(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        recovered = recover_array(reader.numbers(reader.number() + 2))
        yield "-1" if recovered is None else _join(recovered)


@_problem("even-odd-game")
def _even_odd_game(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield even_odd_winner(reader.numbers(reader.number()))


@_problem("same-differences")
def _same_differences(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield str(count_same_differences(reader.numbers(reader.number())))


@_problem("deque")
def _deque(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        yield _join(minimize_by_deque(reader.numbers(reader.number())))


@_problem("grid-fill")
def _grid_fill(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        for row in fill_grid(reader.number()):
            yield _join(row)


@_problem("binary-string")
def _binary_string(text: str) -> Iterator[str]:
    reader = _Reader(text)
    for _ in reader.cases():
        n, m = reader.numbers(2)
        length, value = build_binary_string(n, m)
        yield str(length)
        yield value


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem for the input on stdin; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Read a problem's input from stdin and print its answers.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    args = parser.parse_args(argv)
    text = sys.stdin.read()
    try:
        lines = list(_PROBLEMS[args.problem](text))
    except ValueError as exc:
        print(f"contestkit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
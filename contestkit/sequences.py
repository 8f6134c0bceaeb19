"""Array problems: sequence transformation, similar pairs, stable groups."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def min_transformation_ops(values: Sequence[int]) -> int:
    """Fewest segment removals that leave only copies of one value.

    Values must lie in ``1..len(values)``. Choosing a value ``v``, every
    maximal run of elements other than ``v`` costs one removal; the cheapest
    choice of ``v`` is returned.
    """
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    last_seen: dict[int, int] = {}
    gaps: Counter[int] = Counter()
    for position, value in enumerate(values, start=1):
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside 1..{n}")
        if position - last_seen.get(value, 0) != 1:
            gaps[value] += 1
        last_seen[value] = position
    return min(gaps[value] + (last != n) for value, last in last_seen.items())


def has_similar_pairing(values: Sequence[int]) -> bool:
    """True if the values can be split into pairs of similar numbers.

    Two numbers are similar when they share parity or differ by exactly one.
    """
    odd = sum(1 for value in values if value % 2)
    even = len(values) - odd
    if odd % 2 == 0 and even % 2 == 0:
        return True
    ordered = sorted(values)
    return any(high - low == 1 for low, high in pairwise(ordered))


def min_stable_groups(levels: Sequence[int], k: int, x: int) -> int:
    """Fewest stable groups after inviting up to ``k`` extra students.

    A group is stable when neighbouring levels, once sorted, differ by at
    most ``x``.
    """
    if not levels:
        raise ValueError("levels must not be empty")
    if x <= 0:
        raise ValueError("x must be positive")
    ordered = sorted(levels)
    gaps = sorted(high - low for low, high in pairwise(ordered) if high - low > x)
    closed = 0
    for gap in gaps:
        if k == 0:
            break
        needed = (gap + x - 1) // x - 1
        if k < needed:
            break
        k -= needed
        closed += 1
    return len(gaps) - closed + 1


def first_three_sum_plus_two(values: Sequence[int]) -> int:
    """Sum of the first three values, plus two."""
    if len(values) < 3:
        raise ValueError("at least three values are required")
    return sum(values[:3]) + 2
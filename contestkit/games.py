"""Array games: corrupted arrays, the even-odd game and equal differences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def recover_array(values: Sequence[int]) -> list[int] | None:
    """Recover the hidden array from its corrupted form.

    ``values`` holds the ``n`` hidden elements, their sum and one unrelated
    number, shuffled. Returns the hidden elements in ascending order, or
    ``None`` when no choice of sum and extra number is consistent.
    """
    if len(values) < 3:
        raise ValueError("at least three values are required")
    ordered = sorted(values)
    counts = Counter(ordered)
    total = sum(ordered)
    for index, candidate in enumerate(ordered):
        rest = total - candidate
        if rest % 2:
            continue
        half = rest // 2
        if half not in counts:
            continue
        if half == candidate and counts[candidate] < 2:
            continue
        remaining = ordered[:index] + ordered[index + 1 :]
        remaining.remove(half)
        return remaining
    return None


def even_odd_winner(values: Sequence[int]) -> str:
    """Winner of the even-odd game under optimal play.

    Alice scores even numbers she takes and Bob scores odd ones; both
    always take the largest remaining number. Returns ``"Alice"``,
    ``"Bob"`` or ``"Tie"``.
    """
    balance = 0
    for turn, value in enumerate(sorted(values, reverse=True)):
        if turn % 2 == 0:
            if value % 2 == 0:
                balance += value
        elif value % 2 == 1:
            balance -= value
    if balance == 0:
        return "Tie"
    return "Alice" if balance > 0 else "Bob"


def count_same_differences(values: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``values[j] - values[i] == j - i``."""
    seen: Counter[int] = Counter()
    pairs = 0
    for index, value in enumerate(values):
        key = value - index
        pairs += seen[key]
        seen[key] += 1
    return pairs
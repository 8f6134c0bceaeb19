"""Greedy problems: broken keyboards, card decks, cheap spheres, pair removals."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


def count_typable_substrings(text: str, keys: Iterable[str]) -> int:
    """Number of non-empty substrings of ``text`` typable with only ``keys``.

    Every maximal run of typable characters of length ``L`` contributes
    ``L * (L + 1) // 2`` substrings.
    """
    allowed = frozenset(keys)
    total = 0
    for typable, run in groupby(text, key=allowed.__contains__):
        if typable:
            length = sum(1 for _ in run)
            total += length * (length + 1) // 2
    return total


def card_deck_positions(deck: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Answer each query with the 1-based position of the topmost card of that colour.

    After each query the found card is moved to the top of the deck.
    """
    cards = list(deck)
    positions = []
    for colour in queries:
        try:
            index = cards.index(colour)
        except ValueError:
            raise ValueError(f"no card of colour {colour} in the deck") from None
        positions.append(index + 1)
        cards.insert(0, cards.pop(index))
    return positions


def arrange_cheap_spheres(prices: Sequence[int]) -> tuple[int, list[int]]:
    """Order the spheres to maximise how many are cheaper than both neighbours.

    Returns the count the arrangement guarantees and the arrangement itself:
    the upper half of the sorted prices alternates with the lower half,
    starting and ending with the upper half.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    ordered = sorted(prices)
    n = len(ordered)
    mid = n // 2
    cheap = mid if n % 2 else mid - 1
    low, high = ordered[:mid], ordered[mid:]
    arrangement = []
    for upper, lower in zip(high, low):
        arrangement.extend((upper, lower))
    arrangement.extend(high[len(low):])
    return cheap, arrangement


def min_score_after_operations(values: Sequence[int], k: int) -> int:
    """Smallest score after exactly ``k`` operations.

    Each operation removes two elements ``x`` and ``y`` and adds ``x // y``
    to the score; the remaining elements are then added. The ``k`` largest
    values are each paired with the next ``k`` largest.
    """
    n = len(values)
    if k < 0:
        raise ValueError("k must not be negative")
    if 2 * k > n:
        raise ValueError("k operations need at least 2*k values")
    ordered = sorted(values)
    kept = ordered[: n - 2 * k]
    paired = ordered[n - 2 * k : n - k]
    top = ordered[n - k :]
    return sum(kept) + sum(small // large for small, large in zip(paired, top))
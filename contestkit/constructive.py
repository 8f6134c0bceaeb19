"""Constructive problems: deque minimisation, grid filling, binary strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def minimize_by_deque(values: Iterable[int]) -> list[int]:
    """Lexicographically smallest sequence from pushing values onto a deque.

    Each value goes to the front if it is smaller than the current front,
    otherwise to the back.
    """
    result: deque[int] = deque()
    for value in values:
        if not result or value < result[0]:
            result.appendleft(value)
        else:
            result.append(value)
    return list(result)


def fill_grid(n: int) -> list[list[int]]:
    """An ``n`` by ``n`` grid of ``-1`` and ``1``.

    For even ``n`` every cell is ``-1``; for odd ``n`` the main diagonal is
    ``-1`` and every other cell is ``1``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n % 2 == 0:
        return [[-1] * n for _ in range(n)]
    return [[-1 if row == col else 1 for col in range(n)] for row in range(n)]


def build_binary_string(n: int, m: int) -> tuple[int, str]:
    """Build a binary string from ``n`` and ``m`` and report its length.

    Equal counts give ``"01"`` repeated ``n + 1`` times; otherwise the
    shorter count is covered by two-character blocks and the excess by
    three-character blocks.
    """
    if n < 0 or m < 0:
        raise ValueError("n and m must not be negative")
    if n == m:
        text = "01" * (n + 1)
    elif m < n:
        text = "01" * m + "010" * (n - m)
    else:
        text = "10" * n + "101" * (m - n)
    return len(text), text
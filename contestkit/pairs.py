"""Pairing problems: ternary splits, array matching, teams, repeats, progressions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_TERNARY_DIGITS = frozenset("012")


def ternary_xor_split(x: str) -> tuple[str, str]:
    """Split a ternary number into ``(a, b)`` with ``a ⊙ b == x``.

    The ternary XOR adds digits modulo 3. The split keeps ``max(a, b)`` as
    small as possible: digits are halved until the first ``1``, which goes
    to ``a``; every later digit goes to ``b``.
    """
    if not x:
        raise ValueError("x must not be empty")
    if not set(x) <= _TERNARY_DIGITS:
        raise ValueError(f"not a ternary number: {x!r}")
    split_at = x.find("1")
    if split_at == -1:
        halves = "".join(str(int(digit) // 2) for digit in x)
        return halves, halves
    head = "".join(str(int(digit) // 2) for digit in x[:split_at])
    tail = x[split_at + 1 :]
    a = head + "1" + "0" * len(tail)
    b = head + "0" + tail
    return a, b


def arrays_can_match(a: Sequence[int], b: Sequence[int]) -> bool:
    """True if ``a`` can be reordered so each element equals or is one below ``b``'s.

    Both arrays are reordered freely; each ``a`` value may be used as is or
    increased by one.
    """
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    return all(y in (x, x + 1) for x, y in zip(sorted(a), sorted(b)))


def max_team_size(skills: Sequence[int]) -> int:
    """Largest size of two disjoint equal-sized teams.

    One team has all distinct skills, the other all the same skill.
    """
    if not skills:
        raise ValueError("skills must not be empty")
    counts = Counter(skills)
    most = max(counts.values())
    distinct = len(counts)
    if most - 1 >= distinct:
        return distinct
    return min(most, distinct - 1)


def repeated_words(line: str) -> list[tuple[str, int]]:
    """Words occurring at least twice, with their counts, in first-seen order.

    Words are separated by single spaces, so consecutive spaces yield empty
    words; a trailing space does not.
    """
    line = line.rstrip("\r\n")
    words = line.split(" ")
    if words[-1] == "":
        words.pop()
    counts = Counter(words)
    return [(word, count) for word, count in counts.items() if count >= 2]


def restore_progression(n: int, a: int, b: int) -> list[int]:
    """An arithmetic progression of ``n`` distinct positive integers with ``a`` and ``b``.

    The step is the smallest one for which ``b - a`` is a multiple; values
    are filled between ``a`` and ``b`` first, then below ``a`` while they
    stay positive, then above ``b``. The result is sorted ascending.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    if a < 1:
        raise ValueError("a must be positive")
    if b <= a:
        raise ValueError("b must be greater than a")
    extra = n - 2
    values = [a, b]
    if extra == 0:
        return values
    between = extra
    span = b - a
    while span % (between + 1) != 0:
        between -= 1
    step = span // (between + 1)
    values.extend(range(a + step, b, step))
    remaining = extra - between
    below = min(remaining, (a - 1) // step)
    values.extend(a - step * i for i in range(1, below + 1))
    remaining -= below
    values.extend(b + step * i for i in range(1, remaining + 1))
    return sorted(values)
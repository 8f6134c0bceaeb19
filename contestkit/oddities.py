"""Small standalone checks: a digit-triple pattern and 12-to-24-hour time."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

_PATTERN = (1, 5, 4)
_LIMIT = 154


def _contains_pattern(values: Sequence[int]) -> bool:
    matched = 0
    for value in values:
        if matched < len(_PATTERN) and value == _PATTERN[matched]:
            matched += 1
        if matched == len(_PATTERN):
            return True
    return False


def is_largest_154(values: Sequence[int]) -> bool:
    """True if 1, 5, 4 occurs as a subsequence and no ordered triple beats 154.

    Each ordered triple ``(x, y, z)`` is read as the number ``100x + 10y + z``.
    """
    if not _contains_pattern(values):
        return False
    return all(
        x * 100 + y * 10 + z <= _LIMIT for x, y, z in combinations(values, 3)
    )


def to_24_hour(hour: int, rest: str) -> str:
    """Convert a 12-hour time to 24-hour form.

    ``rest`` is the text following the hour, e.g. ``":05:45PM"``.
    """
    if len(rest) < 8:
        raise ValueError(f"malformed time remainder: {rest!r}")
    clock, suffix = rest[:6], rest[6:8]
    if suffix == "AM":
        if hour < 10:
            prefix = f"0{hour}"
        elif hour == 12:
            prefix = "00"
        else:
            prefix = str(hour)
    elif suffix == "PM":
        prefix = str(hour + 12)
    else:
        raise ValueError(f"expected AM or PM, got {suffix!r}")
    return prefix + clock
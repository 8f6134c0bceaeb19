from collections import Counter

import pytest

from contestkit.constructive import build_binary_string, fill_grid, minimize_by_deque


def test_minimize_by_deque_example():
    assert minimize_by_deque([3, 1, 2, 4]) == [1, 3, 2, 4]


@pytest.mark.parametrize(
    "values", [[3, 2, 1], [1, 2, 3], [5, 4, 6, 1, 2, 3], [2, 2, 1]]
)
def test_minimize_by_deque_is_permutation_starting_with_min(values):
    result = minimize_by_deque(values)
    assert Counter(result) == Counter(values)
    assert result[0] == min(values)


def test_minimize_by_deque_empty():
    assert minimize_by_deque([]) == []


def test_minimize_by_deque_accepts_iterator():
    assert minimize_by_deque(iter([2, 1])) == [1, 2]


@pytest.mark.parametrize("n", [2, 4, 6])
def test_fill_grid_even_all_minus_one(n):
    grid = fill_grid(n)
    assert len(grid) == n
    assert all(row == [-1] * n for row in grid)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_fill_grid_odd_diagonal(n):
    grid = fill_grid(n)
    assert len(grid) == n
    for r, row in enumerate(grid):
        assert len(row) == n
        for c, cell in enumerate(row):
            assert cell == (-1 if r == c else 1)


def test_fill_grid_rejects_negative():
    with pytest.raises(ValueError):
        fill_grid(-1)


def test_build_binary_string_example():
    assert build_binary_string(2, 1) == (5, "01010")


@pytest.mark.parametrize("n, m", [(0, 0), (3, 3), (1, 4), (4, 1), (0, 2), (2, 0)])
def test_build_binary_string_length_matches(n, m):
    length, text = build_binary_string(n, m)
    assert length == len(text)
    assert set(text) <= {"0", "1"}


def test_build_binary_string_equal_counts_alternate():
    _, text = build_binary_string(3, 3)
    assert all(a != b for a, b in zip(text, text[1:]))
    assert text.startswith("0")


def test_build_binary_string_more_ones_starts_with_one():
    _, text = build_binary_string(1, 3)
    assert text.startswith("1")
    assert text.endswith("101")


def test_build_binary_string_rejects_negative():
    with pytest.raises(ValueError):
        build_binary_string(-1, 2)
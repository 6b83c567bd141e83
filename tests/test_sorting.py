import random

import pytest

from dsalgo.sorting import (
    ascending_values,
    descending_values,
    merge_sort,
    quick_sort,
    random_values,
)

CASES = [
    [],
    [1],
    [2, 1],
    [5, 3, 3, 9, 0, -4, 7],
    list(range(50)),
    list(range(50, 0, -1)),
    [4] * 20,
]


@pytest.mark.parametrize("values", CASES)
@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_sorts_match_builtin(sorter, values):
    assert sorter(values) == sorted(values)


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_sorts_random_lists(sorter):
    rng = random.Random(11)
    for size in (10, 101, 500):
        values = [rng.randrange(-100, 100) for _ in range(size)]
        assert sorter(values) == sorted(values)


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_input_not_mutated(sorter):
    values = [3, 1, 2]
    sorter(values)
    assert values == [3, 1, 2]


def test_quick_sort_long_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values


def test_random_values_range():
    values = random_values(100, random.Random(1))
    assert len(values) == 100
    assert all(0 <= v < 500 for v in values)


def test_ascending_values():
    values = ascending_values(200, random.Random(2))
    assert len(values) == 200
    assert 0 <= values[0] < 5
    assert all(b - a in range(5) for a, b in zip(values, values[1:]))


def test_descending_values():
    values = descending_values(200, random.Random(3))
    assert len(values) == 200
    assert 1000 <= values[0] < 1005
    assert all(a - b in range(5) for a, b in zip(values, values[1:]))


def test_empty_generators():
    assert random_values(0) == []
    assert ascending_values(0) == []
    assert descending_values(0) == []


def test_seeded_generators_repeat():
    first = random_values(20, random.Random(9))
    second = random_values(20, random.Random(9))
    assert len(first) == 20
    assert all(0 <= v < 100 for v in first)
    assert first == second
    rising = ascending_values(30, random.Random(5))
    assert rising == sorted(rising)
    assert rising == ascending_values(30, random.Random(5))
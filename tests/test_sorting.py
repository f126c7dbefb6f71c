from collections import Counter

import pytest

from algodrills.sorting import (
    merge_in_place,
    rearrange_alternately,
    relative_sort,
    sort_012,
    sort_by_frequency,
)


@pytest.mark.parametrize(
    "values",
    [[0, 2, 1, 2, 0], [2, 2, 2], [1, 0], [], [0], [1, 1, 0, 0, 2, 2, 1]],
)
def test_sort_012_matches_sorted(values):
    assert sort_012(values) == sorted(values)


def test_sort_012_treats_other_values_as_two():
    result = sort_012([0, 5, 1])
    assert result == [0, 1, 2]


def test_rearrange_alternately_worked_example():
    assert rearrange_alternately([1, 2, 3, 4, 5, 6]) == [6, 1, 5, 2, 4, 3]


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3], [10, 20, 30, 40, 50]])
def test_rearrange_alternately_invariants(values):
    result = rearrange_alternately(values)
    assert sorted(result) == sorted(values)
    assert result[0] == max(values)
    assert result[1::2] == values[: len(result[1::2])]


def test_rearrange_alternately_empty():
    assert rearrange_alternately([]) == []


def test_relative_sort_worked_example():
    values = [2, 1, 2, 5, 7, 1, 9, 3, 6, 8, 8]
    order = [2, 1, 8, 3]
    assert relative_sort(values, order) == [2, 2, 1, 1, 8, 8, 3, 5, 6, 7, 9]


def test_relative_sort_invariants():
    values = [4, 9, 4, 1, 7, 7, 3, 0]
    order = [7, 42, 4]
    result = relative_sort(values, order)
    assert Counter(result) == Counter(values)
    assert result[:4] == [7, 7, 4, 4]
    assert result[4:] == sorted(result[4:])


def test_relative_sort_repeated_order_entry_used_once():
    result = relative_sort([3, 3, 1], [3, 3])
    assert result == [3, 3, 1]


def test_relative_sort_empty_order_is_ascending():
    values = [5, 2, 8, 2]
    assert relative_sort(values, []) == sorted(values)


def test_sort_by_frequency_worked_example():
    assert sort_by_frequency([5, 5, 4, 6, 4]) == [4, 4, 5, 5, 6]


@pytest.mark.parametrize(
    "values", [[9, 9, 9, 2, 5, 5, 1], [3], [], [7, 1, 7, 1, 2, 2, 2]]
)
def test_sort_by_frequency_invariants(values):
    result = sort_by_frequency(values)
    counts = Counter(values)
    assert Counter(result) == counts
    frequencies = [counts[value] for value in result]
    assert frequencies == sorted(frequencies, reverse=True)
    for earlier, later in zip(result, result[1:]):
        if counts[earlier] == counts[later]:
            assert earlier <= later


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ([1, 5, 9, 10, 15, 20], [2, 3, 8, 13]),
        ([1, 3, 5, 7], [0, 2, 6, 8, 9]),
        ([10, 12], [5, 18, 20]),
        ([5], [1, 2]),
        ([1, 2, 3], [4, 5, 6]),
        ([4, 5, 6], [1, 2, 3]),
        ([], [1, 2]),
        ([3, 4], []),
    ],
)
def test_merge_in_place_splits_sorted_union(a, b):
    expected = sorted(a + b)
    first = len(a)
    merge_in_place(a, b)
    assert a == expected[:first]
    assert b == expected[first:]


def test_merge_in_place_returns_nothing():
    a, b = [2, 4], [1, 3]
    assert merge_in_place(a, b) is None
    assert a + b == [1, 2, 3, 4]
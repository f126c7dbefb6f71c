import pytest

from algodrills.subarrays import subarrays_with_sum


def test_example_windows():
    assert subarrays_with_sum([1, 2, 3, 7, 5], 12) == [(2, 4), (4, 5)]


@pytest.mark.parametrize(
    "values, target",
    [
        ([1, 2, 3, 7, 5], 12),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 15),
        ([4, 0, 0, 4, 1, 3], 4),
        ([2, 2, 2, 2, 2], 6),
    ],
)
def test_reported_windows_sum_to_target(values, target):
    windows = subarrays_with_sum(values, target)
    assert windows
    for start, end in windows:
        assert 1 <= start <= end <= len(values)
        assert sum(values[start - 1:end]) == target


def test_whole_array_window():
    values = [3, 4, 5]
    assert subarrays_with_sum(values, sum(values)) == [(1, len(values))]


def test_no_window_found():
    assert subarrays_with_sum([5, 6, 7], 4) == []


def test_empty_input():
    assert subarrays_with_sum([], 3) == []
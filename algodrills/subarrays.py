"""Contiguous subarrays of non-negative values with a given sum."""

from collections.abc import Iterable


def subarrays_with_sum(values: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Return 1-based (start, end) bounds of windows that sum to ``target``.

    A sliding window is kept; each time it sums to ``target`` after the
    left edge has been pulled in, its bounds are reported. An empty list
    means no window was found.
    """
    items = list(values)
    found: list[tuple[int, int]] = []
    start = 0
    window_sum = 0
    for end, value in enumerate(items):
        window_sum += value
        while window_sum > target and start <= end:
            window_sum -= items[start]
            start += 1
        if window_sum == target:
            found.append((start + 1, end + 1))
    return found
"""Order statistics: quickselect and the peak of a bitonic array."""

import math
from collections.abc import Iterable


def _partition(items: list[int], low: int, high: int) -> int:
    """Lomuto partition of ``items[low:high + 1]`` around its last element."""
    pivot = items[high]
    store = low
    for scan in range(low, high):
        if items[scan] <= pivot:
            items[store], items[scan] = items[scan], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_select(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of ``values``."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie between 1 and {len(items)}, got {k}")
    low, high = 0, len(items) - 1
    while True:
        pivot_index = _partition(items, low, high)
        rank = pivot_index - low
        if rank == k - 1:
            return items[pivot_index]
        if rank > k - 1:
            high = pivot_index - 1
        else:
            k -= rank + 1
            low = pivot_index + 1


def bitonic_maximum(values: Iterable[int]) -> int:
    """Return the peak of an increasing-then-decreasing sequence.

    A single element is its own peak; for two elements the smaller one
    is returned.
    """
    items = list(values)
    if not items:
        raise ValueError("sequence is empty")
    size = len(items)
    if size == 1:
        return items[0]
    if size == 2:
        return min(items)
    if items[-1] > items[0] and items[-1] > items[-2]:
        return items[-1]

    def neighbour(index: int) -> float:
        return items[index] if 0 <= index < size else -math.inf

    low, high = 0, size - 1
    while low <= high:
        mid = low + (high - low) // 2
        here = items[mid]
        if here > neighbour(mid - 1) and here > neighbour(mid + 1):
            return here
        if here < neighbour(mid - 1):
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError("sequence has no strict peak")
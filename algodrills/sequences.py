"""Scans over integer sequences."""

from collections.abc import Iterable


def fibonacci_members(values: Iterable[int]) -> list[int]:
    """Return, in order, the values that are Fibonacci numbers."""
    items = list(values)
    if not items:
        return []
    largest = max(items)
    fibonacci = {0}
    if largest >= 1:
        fibonacci.add(1)
    previous, current = 0, 1
    while previous + current <= largest:
        previous, current = current, previous + current
        fibonacci.add(current)
    return [value for value in items if value in fibonacci]


def overlapping_k_length(values: Iterable[int], k: int) -> int:
    """Sum the lengths of maximal runs of values not above ``k`` that contain ``k``."""
    total = 0
    run = 0
    has_k = False
    for value in values:
        if value < k:
            run += 1
        elif value == k:
            run += 1
            has_k = True
        else:
            if has_k:
                total += run
            run = 0
            has_k = False
    if has_k:
        total += run
    return total


def increasing_array_cost(values: Iterable[int]) -> int:
    """Return the total increase needed to make ``values`` non-decreasing."""
    cost = 0
    ceiling = None
    for value in values:
        if ceiling is None or value >= ceiling:
            ceiling = value
        else:
            cost += ceiling - value
    return cost
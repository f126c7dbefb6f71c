"""Counting pairs and triplets that satisfy arithmetic conditions."""

from collections.abc import Iterable


def count_pairs_with_sum(values: Iterable[int], k: int) -> int:
    """Count index pairs whose values add up to ``k``."""
    items = sorted(values)
    low, high = 0, len(items) - 1
    count = 0
    while low < high:
        total = items[low] + items[high]
        if total == k:
            probe = low
            while probe + 1 < high and items[probe + 1] + items[high] == k:
                probe += 1
                count += 1
            probe = high
            while low < probe - 1 and items[low] + items[probe - 1] == k:
                probe -= 1
                count += 1
            low += 1
            high -= 1
            count += 1
        elif total < k:
            low += 1
        else:
            high -= 1
    return count


def count_triplets(values: Iterable[int]) -> int:
    """Count triplets where two values add up to a third; -1 if there are none."""
    items = sorted(values)
    count = 0
    for target_index in range(2, len(items)):
        target = items[target_index]
        high = target_index - 1
        low = 0
        while low < high:
            total = items[low] + items[high]
            if total == target:
                count += 1
                low += 1
                high -= 1
            elif total < target:
                low += 1
            else:
                high -= 1
    return count if count else -1


def _upper_bound(ordered: list[int], limit: int) -> int:
    """Binary search for the start of the values above ``limit``."""
    low, high = 0, len(ordered) - 1
    found = len(ordered)
    while low <= high:
        mid = (low + high) // 2
        if ordered[mid] <= limit:
            low = mid + 1
        else:
            found = high
            high = mid - 1
    return found


def count_power_pairs(a: Iterable[int], b: Iterable[int]) -> int:
    """Count pairs (x from ``a``, y from ``b``) taken to satisfy x**y > y**x."""
    xs = sorted(a)
    size = len(xs)
    total = 0
    for y in b:
        if y == 1:
            first_other = next(
                (index for index, x in enumerate(xs) if x != 1), size
            )
            total += size - first_other
        elif y == 2:
            stop = size
            for index, x in enumerate(xs):
                if x == 1:
                    total += 1
                elif x > 4:
                    stop = index
                    break
            total += size - stop
        else:
            total += size - _upper_bound(xs, y)
    return total
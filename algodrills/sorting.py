"""Sorting drills: counting sorts, interleaving, relative and frequency orders."""

from collections import Counter
from collections.abc import Iterable, MutableSequence
from itertools import chain, islice


def sort_012(values: Iterable[int]) -> list[int]:
    """Return the values as a run of 0s, then 1s, then 2s.

    Any value other than 0 or 1 is counted as a 2.
    """
    counts = Counter(0 if value == 0 else 1 if value == 1 else 2 for value in values)
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def rearrange_alternately(values: Iterable[int]) -> list[int]:
    """Interleave a sorted sequence as largest, smallest, second largest, ..."""
    items = list(values)
    interleaved = chain.from_iterable(zip(reversed(items), items))
    return list(islice(interleaved, len(items)))


def relative_sort(values: Iterable[int], order: Iterable[int]) -> list[int]:
    """Order ``values`` by their first position in ``order``.

    Values that do not appear in ``order`` follow in ascending order.
    """
    counts = Counter(values)
    result: list[int] = []
    for value in order:
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def sort_by_frequency(values: Iterable[int]) -> list[int]:
    """Return the values grouped by descending frequency, ties by ascending value."""
    counts = Counter(values)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, count in ordered for _ in range(count)]


def _next_gap(gap: int) -> int:
    return 0 if gap <= 1 else (gap + 1) // 2


def merge_in_place(a: MutableSequence[int], b: MutableSequence[int]) -> None:
    """Merge two sorted sequences in place with the gap method.

    Afterwards ``a`` holds the smallest ``len(a)`` values and ``b`` the
    rest, both in ascending order. Both inputs must already be sorted.
    """
    first = len(a)
    total = first + len(b)

    def slot(index: int) -> tuple[MutableSequence[int], int]:
        return (a, index) if index < first else (b, index - first)

    gap = _next_gap(total)
    while gap > 0:
        for left in range(total - gap):
            left_seq, left_at = slot(left)
            right_seq, right_at = slot(left + gap)
            if left_seq[left_at] > right_seq[right_at]:
                left_seq[left_at], right_seq[right_at] = (
                    right_seq[right_at],
                    left_seq[left_at],
                )
        gap = _next_gap(gap)
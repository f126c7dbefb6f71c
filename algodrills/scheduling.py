"""Greedy selection of non-overlapping activities."""

from collections.abc import Iterable, Iterator


def _greedy(starts: Iterable[int], ends: Iterable[int]) -> Iterator[int]:
    """Yield 1-based indices of activities chosen by earliest finish time."""
    activities = sorted(
        ((end, start, index) for index, (start, end) in enumerate(
            zip(list(starts), list(ends), strict=True), start=1
        )),
        key=lambda activity: activity[0],
    )
    last_end = 0
    for end, start, index in activities:
        if start >= last_end:
            last_end = end
            yield index


def max_activities(starts: Iterable[int], ends: Iterable[int]) -> int:
    """Return how many activities one person can do, one at a time."""
    return sum(1 for _ in _greedy(starts, ends))


def meeting_order(starts: Iterable[int], ends: Iterable[int]) -> list[int]:
    """Return the 1-based indices of the meetings held in one room, in order."""
    return list(_greedy(starts, ends))
"""Introductory problems: permutations, repetitions and the Collatz walk."""

from itertools import chain, groupby


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Raises ValueError when no such permutation exists.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return [1]
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    if n % 2 == 0:
        return list(chain(range(2, n + 1, 2), range(1, n, 2)))
    return list(chain(range(n, 0, -2), range(n - 1, 0, -2)))


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)


def collatz_sequence(n: int) -> list[int]:
    """Return the Collatz walk from ``n`` down to 1, both included."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    steps = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        steps.append(n)
    return steps
"""Rotations of sequences and square matrices."""

from collections.abc import Iterable, Sequence


def rotate_left(values: Iterable[int], d: int) -> list[int]:
    """Return ``values`` rotated left by ``d`` positions.

    ``d`` must lie between 0 and the length of the sequence, inclusive.
    """
    items = list(values)
    if not 0 <= d <= len(items):
        raise ValueError(
            f"rotation {d} is outside the range 0..{len(items)}"
        )
    return items[d:] + items[:d]


def rotate_matrix_clockwise(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix turned a quarter turn clockwise."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(rows))]
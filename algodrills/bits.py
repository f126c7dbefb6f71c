"""Bit tricks on non-negative integers."""

from collections.abc import Iterable
from functools import reduce
from operator import xor


def _xor_up_to(n: int) -> int:
    """Return 1 ^ 2 ^ ... ^ n, using the period-4 pattern of the prefix."""
    remainder = n % 4
    if remainder == 0:
        return n
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    return 0


def missing_number(n: int, values: Iterable[int]) -> int:
    """Return the one number of 1..n absent from ``values``.

    ``values`` must hold exactly ``n - 1`` numbers.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    items = list(values)
    if len(items) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(items)}")
    return reduce(xor, items, _xor_up_to(n))


def first_set_bit(n: int) -> int:
    """Return the 1-based position of the lowest set bit, or 0 for zero."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return (n & -n).bit_length()


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return n != 0 and n & (n - 1) == 0


def rightmost_different_bit(m: int, n: int) -> int:
    """Return the 1-based position of the lowest bit in which ``m`` and ``n`` differ."""
    difference = m ^ n
    if difference == 0:
        raise ValueError("the numbers are equal and differ in no bit")
    return (difference & -difference).bit_length()


def total_set_bits(n: int) -> int:
    """Return the number of set bits over all integers from 1 to ``n``."""
    if n <= 0:
        return 0
    total = 0
    for bit in range(n.bit_length()):
        period = 1 << (bit + 1)
        half = 1 << bit
        full_cycles, rest = divmod(n + 1, period)
        total += full_cycles * half + max(0, rest - half)
    return total
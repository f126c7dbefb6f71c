"""Solutions to classic array, bit, greedy and counting exercises."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "counting",
    "cses",
    "puzzles",
    "rotation",
    "scheduling",
    "selection",
    "sequences",
    "sorting",
    "subarrays",
]
"""Small puzzles: reversing dotted words and counting operations."""


def reverse_words(text: str) -> str:
    """Reverse the order of the dot-separated words in ``text``."""
    return ".".join(reversed(text.split(".")))


def min_operations(n: int) -> int:
    """Return the fewest steps from 0 to ``n`` using "add one" and "double"."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    steps = {n: 0}
    for x in range(n - 1, 0, -1):
        options = [steps[x + 1]]
        if 2 * x <= n:
            options.append(steps[2 * x])
        steps[x] = 1 + min(options)
    return 1 + steps[1]
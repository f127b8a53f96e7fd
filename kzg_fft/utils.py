"""Shared helpers for the transform and settings modules."""


class BadArgumentsError(ValueError):
    """Invalid parameters were supplied. Raised before any output is written."""


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, ...; false for zero and negatives."""
    return n > 0 and (n & (n - 1)) == 0


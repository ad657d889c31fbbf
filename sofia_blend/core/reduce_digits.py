"""Digit Reducer: folds an integer into the 1–12 range by repeated digit sums.

Invariants:
    - reduce_to_twelve(n) <= 12 for every n >= 0; values already <= 12 are returned unchanged
    - reduce_to_twelve is idempotent on its own output
    - Negative input is rejected (never produced by birth-date arithmetic)
"""

REDUCTION_CEILING: int = 12


def digit_sum(n: int) -> int:
    """Sum of the base-10 digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"digit_sum requires a non-negative integer, got {n}")
    return sum(int(digit) for digit in str(n))


def reduce_to_twelve(n: int) -> int:
    """Fold n by digit sums until it is at most 12."""
    if n < 0:
        raise ValueError(f"reduce_to_twelve requires a non-negative integer, got {n}")
    while n > REDUCTION_CEILING:
        n = digit_sum(n)
    return n

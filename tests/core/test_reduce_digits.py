"""Digit Reducer: tests for reduce_to_twelve and digit_sum.

Tests cover:
    - Values already in range are returned unchanged
    - Multi-step folding (1999 -> 28 -> 10)
    - Codomain and idempotence over a wide input range
    - Negative input rejected
"""

import pytest

from sofia_blend.core.reduce_digits import REDUCTION_CEILING, digit_sum, reduce_to_twelve


# ─── digit_sum ───────────────────────────────────────────────────

def test_digit_sum_of_year():
    assert digit_sum(1990) == 19


def test_digit_sum_of_single_digit_is_itself():
    assert digit_sum(7) == 7


def test_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        digit_sum(-5)


# ─── reduce_to_twelve ────────────────────────────────────────────

@pytest.mark.parametrize("n", [1, 7, 10, 11, 12])
def test_values_in_range_are_unchanged(n):
    assert reduce_to_twelve(n) == n


def test_zero_is_returned_unchanged():
    assert reduce_to_twelve(0) == 0


def test_thirteen_reduces_to_four():
    assert reduce_to_twelve(13) == 4


def test_folds_until_at_most_twelve():
    # 1999 -> 28 -> 10
    assert reduce_to_twelve(1999) == 10


def test_single_fold_landing_on_twelve_stops():
    assert reduce_to_twelve(39) == 12


def test_fold_that_overshoots_folds_again():
    # 49 -> 13 -> 4
    assert reduce_to_twelve(49) == 4


def test_codomain_and_idempotence():
    for n in range(1, 5000):
        reduced = reduce_to_twelve(n)
        assert 1 <= reduced <= REDUCTION_CEILING
        assert reduce_to_twelve(reduced) == reduced


def test_rejects_negative():
    with pytest.raises(ValueError):
        reduce_to_twelve(-1)

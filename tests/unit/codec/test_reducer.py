"""Tests for fraction reduction policies."""

import pytest

from fraction_text.codec.errors import FractionDefect, InvalidConfiguration
from fraction_text.codec.reducer import (
    ExactFromDecimalDigits,
    MaxDenominator,
    greatest_common_divisor,
    reduce_fraction,
)


@pytest.mark.unit
class TestGreatestCommonDivisor:
    def test_integers_are_exact(self):
        assert greatest_common_divisor(12, 18) == 6
        assert greatest_common_divisor(3333, 10000) == 1
        assert greatest_common_divisor(-4, 6) == 2

    def test_zero_operands(self):
        assert greatest_common_divisor(0, 5) == 5
        assert greatest_common_divisor(7, 0) == 7

    def test_floats_use_tolerance(self):
        assert greatest_common_divisor(0.5, 0.25) == 0.25


@pytest.mark.unit
class TestExactFromDecimalDigits:
    @pytest.mark.parametrize(
        "fraction,expected",
        [
            (0.0, (0, 1)),
            (0.5, (1, 2)),
            (0.125, (1, 8)),
            (0.3333, (3333, 10000)),
            (0.75, (3, 4)),
            (1e-05, (1, 100000)),
        ],
    )
    def test_reduces_observed_digits(self, fraction, expected):
        assert reduce_fraction(fraction, ExactFromDecimalDigits()) == expected

    def test_repeating_decimal_keeps_every_digit(self):
        numerator, denominator = reduce_fraction(1 / 3, ExactFromDecimalDigits())

        assert denominator == 10**16
        assert abs(numerator / denominator - 1 / 3) < 1e-12


@pytest.mark.unit
class TestMaxDenominator:
    @pytest.mark.parametrize(
        "fraction,bound,expected",
        [
            (0.3333, 16, (1, 3)),
            (0.2, 16, (1, 5)),
            (0.6875, 16, (11, 16)),
            (0.4, 1, (0, 1)),
            (0.6, 1, (1, 1)),
            (0.99, 8, (1, 1)),
        ],
    )
    def test_closest_fraction_within_bound(self, fraction, bound, expected):
        assert reduce_fraction(fraction, MaxDenominator(bound)) == expected

    def test_ties_keep_smaller_denominator(self):
        # 1/1 and 2/2 are equally far from 0.75
        assert reduce_fraction(0.75, MaxDenominator(2)) == (1, 1)

    def test_result_is_in_lowest_terms(self):
        assert reduce_fraction(0.5, MaxDenominator(10)) == (1, 2)

    @pytest.mark.parametrize("bound", [0, -3])
    def test_non_positive_bound_rejected(self, bound):
        with pytest.raises(InvalidConfiguration):
            reduce_fraction(0.5, MaxDenominator(bound))


@pytest.mark.unit
class TestReducePreconditions:
    @pytest.mark.parametrize("fraction", [-0.1, 1.0, 2.5])
    def test_out_of_range_fraction_is_a_defect(self, fraction):
        with pytest.raises(FractionDefect):
            reduce_fraction(fraction, ExactFromDecimalDigits())

    def test_unknown_policy_rejected(self):
        with pytest.raises(InvalidConfiguration):
            reduce_fraction(0.5, "exact")

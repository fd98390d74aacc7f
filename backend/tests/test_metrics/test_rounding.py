"""Unit tests for two-decimal rounding."""

import math
from decimal import Decimal

import pytest

from revportal.metrics import round2
from revportal.metrics.rounding import to_decimal


class TestRound2:
    """round2 quantizes to cents with ties away from zero."""

    def test_rounds_down_below_half(self):
        assert round2(1.234) == Decimal("1.23")

    def test_rounds_up_at_half(self):
        assert round2(Decimal("1.235")) == Decimal("1.24")

    def test_ties_away_from_zero_for_negatives(self):
        assert round2(Decimal("-1.235")) == Decimal("-1.24")

    def test_float_ties_use_shortest_repr(self):
        # 1.005 is stored as 1.00499999...; the written value is what rounds
        assert round2(1.005) == Decimal("1.01")
        assert round2(2.675) == Decimal("2.68")

    def test_integers_gain_two_places(self):
        result = round2(160)
        assert result == Decimal("160.00")
        assert result.as_tuple().exponent == -2

    @pytest.mark.parametrize(
        "value",
        [
            0.1 + 0.2,
            3.14159,
            99.995,
            -0.005,
            1e6 / 7,
            Decimal("12.3456"),
            Decimal("9999.995"),
            Decimal("99999999.99"),
            1e30,
            -1e30,
            Decimal("9" * 40 + ".995"),
            1.7976931348623157e308,
        ],
    )
    def test_idempotent(self, value):
        once = round2(value)
        assert round2(once) == once

    def test_large_values_keep_cents(self):
        result = round2(1e30)
        assert result == Decimal("1e30")
        assert result.as_tuple().exponent == -2

    def test_carry_adds_an_integer_digit(self):
        assert round2(Decimal("9" * 30 + ".995")) == Decimal("1e30")

    def test_nan_and_infinity_pass_through(self):
        assert math.isnan(round2(float("nan")))
        assert round2(float("inf")) == float("inf")
        assert round2(Decimal("-Infinity")) == Decimal("-Infinity")


class TestToDecimal:
    """to_decimal accepts numbers only."""

    def test_float_keeps_written_digits(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_is_returned_as_is(self):
        value = Decimal("7.50")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["1.0", None, True])
    def test_non_numbers_rejected(self, value):
        with pytest.raises(TypeError):
            to_decimal(value)

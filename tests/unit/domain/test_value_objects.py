"""
Unit tests for the shared money primitives.
"""

from decimal import Decimal

import pytest

from marketplace.core.domain import Money, Percentage


@pytest.mark.unit
class TestMoney:
    def test_amount_is_held_to_the_cent(self):
        assert Money(Decimal("10.5")).amount == Decimal("10.50")
        assert Money("7.2500").amount == Decimal("7.25")
        assert str(Money(3).amount) == "3.00"

    @pytest.mark.parametrize("amount", ["10.005", "10.004", "0.001"])
    def test_sub_cent_amount_rejected(self, amount):
        with pytest.raises(ValueError, match="fractions of a cent"):
            Money(Decimal(amount))

    def test_float_input_has_no_binary_artefacts(self):
        assert Money(0.1).add(Money(0.2)).amount == Decimal("0.30")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Money(Decimal("-0.01"))

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(ValueError):
            Money(Decimal("5.00")).subtract(Money(Decimal("5.01")))

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValueError, match="Currency mismatch"):
            Money(Decimal("1.00"), "INR").add(Money(Decimal("1.00"), "USD"))

    def test_multiply_and_total(self):
        line = Money(Decimal("19.99")).multiply(3)

        assert line.amount == Decimal("59.97")
        assert Money.total([line, Money(Decimal("0.03"))]).amount == Decimal("60.00")
        assert Money.total([]).is_zero()


@pytest.mark.unit
class TestPercentage:
    @pytest.mark.parametrize("value", ["-0.01", "100.01", "NaN"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValueError):
            Percentage(Decimal(value))

    def test_bounds_are_inclusive(self):
        assert Percentage(Decimal("0")).value == Decimal("0.00")
        assert Percentage(Decimal("100")).value == Decimal("100.00")

    def test_apply_to_rounds_half_up(self):
        # 33.33 * 12.5% = 4.16625
        assert Percentage(Decimal("12.5")).apply_to(Money(Decimal("33.33"))).amount == Decimal("4.17")

    def test_as_decimal(self):
        assert Percentage(Decimal("15")).as_decimal == Decimal("0.15")

"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.value_objects import (
    Money,
    Quantity,
    is_quantity_text,
    parse_quantity,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "PKR"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_fractional_quantity(self):
        assert Money.of("40") * Quantity(Decimal("2.5")) == Money.of("100")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("1") + Money(Decimal("1"), "USD")

    def test_display(self):
        assert str(Money.of("150")) == "PKR 150.00"

    def test_zero(self):
        assert Money.zero().amount == Decimal("0")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_int_is_coerced_to_decimal(self):
        assert Quantity(3).value == Decimal("3")

    def test_fractional_quantity(self):
        assert Quantity(Decimal("0.25")).value == Decimal("0.25")

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(Decimal("-1"))

    def test_non_number_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be a number"):
            Quantity("3")

    def test_bool_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity(True)

    def test_nan_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity(Decimal("NaN"))

    def test_float_is_coerced_through_its_text(self):
        assert Quantity(2.5).value == Decimal("2.5")
        assert Quantity(0.1).value == Decimal("0.1")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), 0.0, -1.5])
    def test_unusable_float_rejected(self, value):
        with pytest.raises(InvalidQuantityError):
            Quantity(value)

    def test_addition(self):
        assert Quantity(1) + Quantity(Decimal("1.5")) == Quantity(Decimal("2.5"))

    def test_display_strips_trailing_zeros(self):
        assert str(Quantity(Decimal("3.000"))) == "3"
        assert str(Quantity(Decimal("2.50"))) == "2.5"
        assert str(Quantity(10)) == "10"


# ── Quantity text entry ──────────────────────────────────────────────────────


class TestQuantityText:

    @pytest.mark.parametrize("text", ["", "3", "3.", ".5", "12.75", "."])
    def test_accepted_while_typing(self, text):
        assert is_quantity_text(text)

    @pytest.mark.parametrize("text", ["abc", "-1", "1.2.3", "1,5", " 2", "1e3", "+4", "٣", "2٥"])
    def test_rejected_while_typing(self, text):
        assert not is_quantity_text(text)

    def test_parse_valid(self):
        assert parse_quantity("2.5") == Quantity(Decimal("2.5"))

    def test_parse_trailing_point(self):
        assert parse_quantity("3.") == Quantity(3)

    @pytest.mark.parametrize("text", [None, "", ".", "0", "0.0", "abc", "-2", "٣"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidQuantityError):
            parse_quantity(text)

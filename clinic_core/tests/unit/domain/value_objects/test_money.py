"""
Unit tests for the Money value object.
"""

from decimal import Decimal

import pytest

from clinic_core.domain.exceptions import (
    BusinessRuleError,
    CurrencyMismatchError,
    ValidationError,
)
from clinic_core.domain.value_objects import Money


class TestMoneyCreation:
    """Tests for constructing Money."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (100, Decimal("100.00")),
            (10.005, Decimal("10.01")),
            (10.004, Decimal("10.00")),
            ("99.9", Decimal("99.90")),
            (0, Decimal("0.00")),
        ],
    )
    def test_amount_is_rounded_to_cents(self, amount, expected):
        assert Money.create(amount, "BRL").amount == expected

    def test_default_currency_is_brl(self):
        assert Money.create(10).currency == "BRL"

    def test_amount_is_decimal_and_float_is_explicit(self):
        money = Money.create(19.99, "BRL")

        assert money.amount == Decimal("19.99")
        assert money.amount != 19.99
        assert money.to_float() == 19.99
        assert money.to_dict() == {"amount": 19.99, "currency": "BRL"}

    @pytest.mark.parametrize("amount", [-1, -0.01, "abc", None, float("nan"), True])
    def test_invalid_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            Money.create(amount, "BRL")

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError):
            Money.create(10, "JPY")

    def test_equality_by_value(self):
        assert Money.create(10, "BRL") == Money.create("10.00", "BRL")
        assert Money.create(10, "BRL") != Money.create(10, "USD")


class TestMoneyArithmetic:
    """Tests for arithmetic and comparison."""

    def test_add(self):
        result = Money.create(100, "BRL").add(Money.create(50, "BRL"))
        assert result == Money.create(150, "BRL")

    def test_add_different_currency_fails(self):
        with pytest.raises(CurrencyMismatchError):
            Money.create(100, "BRL").add(Money.create(50, "USD"))

    def test_currency_mismatch_is_business_rule_error(self):
        assert issubclass(CurrencyMismatchError, BusinessRuleError)

    def test_subtract(self):
        result = Money.create(100, "BRL").subtract(Money.create(30.5, "BRL"))
        assert result.amount == Decimal("69.50")

    def test_subtract_below_zero_fails(self):
        with pytest.raises(BusinessRuleError):
            Money.create(10, "BRL").subtract(Money.create(20, "BRL"))

    def test_multiply(self):
        assert Money.create(10, "BRL").multiply(3).amount == Decimal("30.00")

    def test_multiply_by_negative_fails(self):
        with pytest.raises(BusinessRuleError):
            Money.create(10, "BRL").multiply(-1)

    def test_percentage(self):
        assert Money.create(1000, "BRL").percentage(50) == Money.create(500, "BRL")
        assert Money.create(33.33, "BRL").percentage(50).amount == Decimal("16.67")

    def test_comparisons(self):
        small = Money.create(10, "BRL")
        large = Money.create(20, "BRL")

        assert large.is_greater_than(small)
        assert small.is_less_than(large)
        assert not small.is_greater_than(small)

    def test_compare_different_currency_fails(self):
        with pytest.raises(CurrencyMismatchError):
            Money.create(10, "BRL").is_greater_than(Money.create(10, "EUR"))

    def test_is_zero(self):
        assert Money.create(0).is_zero
        assert not Money.create(0.01).is_zero


class TestMoneyFormatting:
    """Tests for display and serialization."""

    def test_format_pt_br(self):
        assert Money.create(1234.5, "BRL").format("pt-BR") == "R$ 1.234,50"

    def test_format_en_us(self):
        assert Money.create(1234.5, "USD").format("en-US") == "US$1,234.50"

    def test_format_uses_default_locale(self):
        assert Money.create(1234567.891, "BRL").format() == "R$ 1.234.567,89"

    def test_to_dict_and_from_dict(self):
        money = Money.create(12.5, "EUR")

        data = money.to_dict()

        assert data == {"amount": 12.5, "currency": "EUR"}
        assert Money.from_dict(data) == money

    def test_str(self):
        assert str(Money.create(5, "BRL")) == "5.00 BRL"

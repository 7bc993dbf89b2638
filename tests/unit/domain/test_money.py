"""Unit tests for Money value object."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from money_percent.domain.value_objects.money import Money, to_decimal


def test_money_normalizes_amount_and_currency():
    """Test Money conversion of amount and currency."""
    money = Money(10, "usd")

    assert money.amount == Decimal("10")
    assert isinstance(money.amount, Decimal)
    assert money.currency == "USD"


def test_float_amount_goes_through_str():
    """Test that floats do not carry binary noise."""
    assert Money(2.35, "EUR").amount == Decimal("2.35")
    assert to_decimal(0.1) == Decimal("0.1")


def test_unknown_currency_raises_error():
    """Test that unknown currency codes are rejected."""
    with pytest.raises(ValueError, match="Unknown currency"):
        Money(Decimal("1"), "ZZQ")


def test_negative_amount_allowed():
    """Test that negative amounts are valid."""
    assert Money(Decimal("-0.5"), "USD").amount == Decimal("-0.5")


def test_multiply_returns_new_money():
    """Test scalar multiplication on both sides."""
    money = Money(Decimal("2.35"), "EUR")

    assert money * Decimal("0.1") == Money(Decimal("0.235"), "EUR")
    assert 2 * money == Money(Decimal("4.70"), "EUR")
    assert money == Money(Decimal("2.35"), "EUR")


def test_multiply_two_money_raises_error():
    """Test that multiplying money by money is rejected."""
    with pytest.raises(TypeError):
        Money(Decimal("1"), "EUR") * Money(Decimal("2"), "EUR")


def test_is_zero():
    """Test zero detection."""
    assert Money(Decimal("0.00"), "USD").is_zero() is True
    assert Money(Decimal("0.01"), "USD").is_zero() is False


def test_display_name():
    """Test currency formatting."""
    assert Money(Decimal("2.35"), "EUR").display_name("en_US") == "€2.35"
    assert str(Money(Decimal("2.35"), "EUR")) == "EUR 2.35"


def test_money_is_immutable():
    """Test that Money cannot be changed."""
    money = Money(Decimal("1"), "USD")
    with pytest.raises(FrozenInstanceError):
        money.amount = Decimal("2")


def test_multiply_unsupported_operand_raises_type_error():
    """Test that non-numeric multipliers raise TypeError."""
    money = Money(Decimal("1"), "EUR")

    with pytest.raises(TypeError):
        money * [1]
    with pytest.raises(TypeError):
        (1, 2) * money

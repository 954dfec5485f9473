from decimal import Decimal

import pytest
from rental.domain.values import Money


def test_money_creation_positive_and_zero():
    assert Money(Decimal("0")).value == Decimal("0")
    assert Money(Decimal("1.99")).value == Decimal("1.99")
    assert Money.zero().is_zero()


def test_money_negative_raises():
    with pytest.raises(ValueError):
        Money(Decimal("-0.01"))


def test_money_arithmetic_returns_money():
    a = Money(Decimal("9.95"))
    b = Money(Decimal("1.99"))

    assert a - b == Money(Decimal("7.96"))
    assert a + b == Money(Decimal("11.94"))
    assert isinstance(b * Decimal("5"), Money)
    assert (b * Decimal("5")).value == Decimal("9.95")


def test_money_subtraction_below_zero_raises():
    with pytest.raises(ValueError):
        Money(Decimal("1.00")) - Money(Decimal("1.01"))


def test_money_equality_ignores_trailing_zeros():
    assert Money(Decimal("0")) == Money(Decimal("0.00"))


def test_money_str():
    assert str(Money(Decimal("1.27"))) == "1.27"

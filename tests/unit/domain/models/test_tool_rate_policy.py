from decimal import Decimal

import pytest
from rental.domain.models import ToolRatePolicy
from rental.domain.values import Money


def test_policy_requires_type_and_brand():
    with pytest.raises(ValueError):
        ToolRatePolicy("", "Werner", Money(Decimal("1.99")), True, True, False)

    with pytest.raises(ValueError):
        ToolRatePolicy("Ladder", "", Money(Decimal("1.99")), True, True, False)


def test_policy_is_hashable_value():
    a = ToolRatePolicy("Ladder", "Werner", Money(Decimal("1.99")), True, True, False)
    b = ToolRatePolicy("Ladder", "Werner", Money(Decimal("1.99")), True, True, False)

    assert a == b
    assert len({a, b}) == 1

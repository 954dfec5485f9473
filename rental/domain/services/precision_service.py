from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class PrecisionPolicy:
    """Policy defining how monetary values are rounded."""

    money_precision: Decimal = Decimal("0.01")
    rounding_mode: str = ROUND_HALF_UP


class PrecisionService:
    """
    Domain service for handling numeric precision.
    """

    def __init__(self, policy: PrecisionPolicy = None):
        self._policy = policy or PrecisionPolicy()

    def round_money(self, value: Decimal) -> Decimal:
        """
        Round a monetary value to the policy precision (cents by default).

        :param value: Decimal value, possibly carrying more digits than cents
        :return: Rounded decimal, e.g. 0.2235 -> 0.22, 0.125 -> 0.13
        """
        return value.quantize(
            self._policy.money_precision, rounding=self._policy.rounding_mode
        )

from decimal import Decimal

from rental.domain.services.precision_service import PrecisionService
from rental.domain.values import Money


class MoneyFactory:
    def __init__(self, precision_service: PrecisionService):
        self._precision = precision_service

    def rounded(self, value: Decimal) -> Money:
        return Money(self._precision.round_money(value))

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Union

from rental.app.ports.outbound.tool_catalog import ToolCatalog
from rental.domain.exceptions import (
    InvalidRentalArgumentError,
    RentalComputationError,
    UnknownToolCodeError,
)
from rental.domain.models import RentalAgreement, ToolRatePolicy
from rental.domain.services import ChargeService
from rental.domain.values import DiscountPercent, RentalPeriod
from rental.shared.logging import get_logger

logger = get_logger(__name__)

Percent = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class CalculateRentalQuery:
    tool_code: str
    rental_day_count: int
    discount_percent: Percent
    checkout_date: date


def _to_decimal(value: Percent) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class CalculateRentalQueryHandler:
    def __init__(self, tool_catalog: ToolCatalog, charge_service: ChargeService):
        self._catalog = tool_catalog
        self._charge_service = charge_service

    def calculate(
        self,
        tool_code: str,
        rental_day_count: int,
        discount_percent: Percent,
        checkout_date: date,
    ) -> RentalAgreement:
        return self.handle(
            CalculateRentalQuery(
                tool_code=tool_code,
                rental_day_count=rental_day_count,
                discount_percent=discount_percent,
                checkout_date=checkout_date,
            )
        )

    def handle(self, query: CalculateRentalQuery) -> RentalAgreement:
        """
        Validate a checkout request and price it.

        :param query: Tool code, rental day count, discount percent and checkout date.
        :return: RentalAgreement with the full charge breakdown

        :raises InvalidRentalArgumentError: If the day count is below 1, the discount
            is outside 0-100, or the tool code is not in the catalog
        :raises RentalComputationError: If pricing fails for any other reason
        """
        try:
            period, discount, policy = self._validate(query)
            agreement = self._charge_service.price(
                query.tool_code, policy, period, discount
            )
        except InvalidRentalArgumentError as e:
            logger.warning(
                "rental_input_rejected",
                tool_code=query.tool_code,
                reason=e.reason,
            )
            raise
        except Exception as e:
            logger.error(
                "rental_calculation_failed",
                tool_code=query.tool_code,
                error=str(e),
                exc_info=True,
            )
            raise RentalComputationError() from e

        logger.info(
            "rental_agreement_calculated",
            tool_code=agreement.tool_code,
            rental_days=agreement.rental_days,
            charge_days=agreement.charge_days,
            final_charge=str(agreement.final_charge),
        )

        return agreement

    def _validate(
        self, query: CalculateRentalQuery
    ) -> tuple[RentalPeriod, DiscountPercent, ToolRatePolicy]:
        day_count = query.rental_day_count
        if isinstance(day_count, bool) or not isinstance(day_count, int):
            raise InvalidRentalArgumentError(
                f"Rental day count must be a whole number: {day_count!r}"
            )
        if day_count < 1:
            raise InvalidRentalArgumentError("Rental day count must be 1 or greater.")

        try:
            percent = _to_decimal(query.discount_percent)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidRentalArgumentError(
                f"Discount percent is not a number: {query.discount_percent!r}"
            ) from e
        if not percent.is_finite() or percent < 0 or percent > 100:
            raise InvalidRentalArgumentError(
                "Discount percent must be in the range 0-100."
            )

        policy = self._catalog.lookup(query.tool_code)
        if policy is None:
            raise UnknownToolCodeError(query.tool_code)

        return (
            RentalPeriod(checkout_date=query.checkout_date, rental_days=day_count),
            DiscountPercent(percent),
            policy,
        )

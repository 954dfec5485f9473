from datetime import date

from rental.domain.models import RentalAgreement, ToolRatePolicy
from rental.domain.services.factory import MoneyFactory
from rental.domain.values import DiscountPercent, RentalPeriod

from .holiday_calendar import HolidayCalendar, is_weekend


class ChargeService:
    def __init__(self, holiday_calendar: HolidayCalendar, money_factory: MoneyFactory):
        self._calendar = holiday_calendar
        self._money = money_factory

    def is_chargeable_day(self, day: date, policy: ToolRatePolicy) -> bool:
        """
        Weekends are billed by the weekend flag alone, even when a holiday
        lands on them. Weekday holidays are never billed; the policy's
        holiday flag is not consulted.
        """
        if is_weekend(day):
            return policy.weekend_charge

        return policy.weekday_charge and not self._calendar.is_holiday(day)

    def count_charge_days(self, period: RentalPeriod, policy: ToolRatePolicy) -> int:
        return sum(
            1 for day in period.billable_dates() if self.is_chargeable_day(day, policy)
        )

    def price(
        self,
        tool_code: str,
        policy: ToolRatePolicy,
        period: RentalPeriod,
        discount: DiscountPercent,
    ) -> RentalAgreement:
        """
        Price a rental of a single tool.

        The pre-discount charge and the discount are rounded to cents
        separately, the discount being taken from the unrounded pre-discount
        charge. The final charge is the difference of the two rounded values
        and is not rounded again.

        :param tool_code: Catalog code of the rented tool
        :param policy: Rate policy of that tool
        :param period: Checkout date and number of rental days
        :param discount: Discount applied to the whole rental

        :return: RentalAgreement with every charge itemized
        """
        charge_days = self.count_charge_days(period, policy)

        pre_discount = policy.daily_charge.value * charge_days
        discount_amount = discount.fraction() * pre_discount

        pre_discount_charge = self._money.rounded(pre_discount)
        discount_charge = self._money.rounded(discount_amount)

        return RentalAgreement(
            tool_code=tool_code,
            tool_type=policy.tool_type,
            tool_brand=policy.brand,
            rental_days=period.rental_days,
            checkout_date=period.checkout_date,
            due_date=period.due_date,
            daily_rental_charge=policy.daily_charge,
            charge_days=charge_days,
            pre_discount_charge=pre_discount_charge,
            discount_percent=discount,
            discount_amount=discount_charge,
            final_charge=pre_discount_charge - discount_charge,
        )

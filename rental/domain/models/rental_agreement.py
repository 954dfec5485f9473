from dataclasses import dataclass
from datetime import date

from rental.domain.values import DiscountPercent, Money


@dataclass(frozen=True)
class RentalAgreement:
    """
    Itemized result of one rental checkout.

    pre_discount_charge and discount_amount are both rounded to cents;
    final_charge is their plain difference.
    """

    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: date
    due_date: date
    daily_rental_charge: Money
    charge_days: int
    pre_discount_charge: Money
    discount_percent: DiscountPercent
    discount_amount: Money
    final_charge: Money

    def __post_init__(self) -> None:
        if not 0 <= self.charge_days <= self.rental_days:
            raise ValueError(
                f"Charge days must be within 0-{self.rental_days}: {self.charge_days}"
            )
        if self.pre_discount_charge - self.discount_amount != self.final_charge:
            raise ValueError(
                f"Final charge {self.final_charge} does not equal "
                f"{self.pre_discount_charge} - {self.discount_amount}"
            )

    def __str__(self) -> str:
        return (
            f"RentalAgreement({self.tool_code}, days={self.rental_days}, "
            f"out={self.checkout_date.isoformat()}, due={self.due_date.isoformat()}, "
            f"final={self.final_charge})"
        )

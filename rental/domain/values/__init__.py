from .discount_percent import DiscountPercent
from .money import Money
from .rental_period import RentalPeriod

__all__ = [
    "DiscountPercent",
    "Money",
    "RentalPeriod",
]

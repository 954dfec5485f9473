from dataclasses import dataclass
from decimal import Decimal

_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class DiscountPercent:
    value: Decimal

    def __post_init__(self) -> None:
        if self.value < 0 or self.value > _HUNDRED:
            raise ValueError(
                f"Discount percent must be in the range 0-100: {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    def fraction(self) -> Decimal:
        """Returns the discount as a multiplier (15% -> 0.15)."""
        return self.value / _HUNDRED

    def is_zero(self) -> bool:
        return self.value == 0

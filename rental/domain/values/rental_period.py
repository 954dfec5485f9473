from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


@dataclass(frozen=True)
class RentalPeriod:
    checkout_date: date
    rental_days: int

    def __post_init__(self) -> None:
        if self.rental_days < 1:
            raise ValueError(
                f"Rental period must span at least one day: {self.rental_days}"
            )

    def __str__(self) -> str:
        return f"{self.checkout_date.isoformat()}..{self.due_date.isoformat()}"

    @property
    def due_date(self) -> date:
        return self.checkout_date + timedelta(days=self.rental_days)

    def billable_dates(self) -> Iterator[date]:
        """
        Dates that may be charged: the day after checkout through the due date.
        The checkout day itself is never billed.
        """
        for offset in range(1, self.rental_days + 1):
            yield self.checkout_date + timedelta(days=offset)

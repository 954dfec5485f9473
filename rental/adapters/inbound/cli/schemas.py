from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rental.app.queries import CalculateRentalQuery

_US_DATE_FORMAT = "%m/%d/%Y"


class CheckoutRequest(BaseModel):
    """
    Raw checkout arguments as typed at the counter.
    Only types are checked here; range checks belong to the charge engine.
    """

    tool_code: str = Field(
        min_length=1,
        max_length=10,
        description="Catalog code of the tool being rented.",
        examples=["LADW"],
    )
    rental_days: int = Field(
        description="Number of days the tool is rented for.", examples=[5]
    )
    discount_percent: Decimal = Field(
        default=Decimal("0"),
        description="Whole-rental discount, 0-100.",
        examples=[10],
    )
    checkout_date: date = Field(
        default_factory=lambda: date.today(),
        description="Checkout date, ISO (2022-03-01) or US (03/01/2022).",
        examples=["2022-03-01", "03/01/2022"],
    )

    @field_validator("tool_code")
    @classmethod
    def strip_tool_code(cls, v: str) -> str:
        return v.strip()

    @field_validator("checkout_date", mode="before")
    @classmethod
    def parse_us_date(cls, v: Any) -> Any:
        if isinstance(v, str) and "/" in v:
            try:
                return datetime.strptime(v.strip(), _US_DATE_FORMAT).date()
            except ValueError as e:
                raise ValueError(
                    f"Checkout date must look like MM/DD/YYYY: {v}"
                ) from e
        return v

    def to_query(self) -> CalculateRentalQuery:
        return CalculateRentalQuery(
            tool_code=self.tool_code,
            rental_day_count=self.rental_days,
            discount_percent=self.discount_percent,
            checkout_date=self.checkout_date,
        )

from dataclasses import dataclass

from rental.domain.values import Money


@dataclass(frozen=True)
class ToolRatePolicy:
    """
    Billing rule for one kind of tool: its daily charge and which kinds of
    days are billable.

    holiday_charge is part of the published rate sheet, but charge day
    counting does not read it: a holiday on a weekday is never billed.
    """

    tool_type: str
    brand: str
    daily_charge: Money
    weekday_charge: bool
    weekend_charge: bool
    holiday_charge: bool

    def __post_init__(self) -> None:
        if not self.tool_type:
            raise ValueError("Tool type cannot be empty")
        if not self.brand:
            raise ValueError("Tool brand cannot be empty")


@dataclass(frozen=True)
class CatalogEntry:
    tool_code: str
    tool_type: str
    brand: str

from decimal import Decimal
from typing import Mapping, Optional

from rental.app.ports.outbound.tool_catalog import ToolCatalog
from rental.domain.models import CatalogEntry, ToolRatePolicy
from rental.domain.values import Money

DEFAULT_TOOL_RATES: Mapping[str, ToolRatePolicy] = {
    "LADW": ToolRatePolicy(
        tool_type="Ladder",
        brand="Werner",
        daily_charge=Money(Decimal("1.99")),
        weekday_charge=True,
        weekend_charge=True,
        holiday_charge=False,
    ),
    "CHNS": ToolRatePolicy(
        tool_type="Chainsaw",
        brand="Stihl",
        daily_charge=Money(Decimal("1.49")),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=True,
    ),
    "JAKD": ToolRatePolicy(
        tool_type="Jackhammer",
        brand="DeWalt",
        daily_charge=Money(Decimal("2.99")),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=False,
    ),
    "JAKR": ToolRatePolicy(
        tool_type="Jackhammer",
        brand="Ridgid",
        daily_charge=Money(Decimal("2.99")),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=False,
    ),
}


class InMemoryToolCatalog(ToolCatalog):
    """
    Read-only catalog seeded once at construction.
    Codes match exactly: "ladw" is not "LADW".
    """

    def __init__(self, rates: Optional[Mapping[str, ToolRatePolicy]] = None):
        self._rates: dict[str, ToolRatePolicy] = dict(
            DEFAULT_TOOL_RATES if rates is None else rates
        )

    def lookup(self, tool_code: str) -> Optional[ToolRatePolicy]:
        return self._rates.get(tool_code)

    def list_entries(self) -> list[CatalogEntry]:
        return [
            CatalogEntry(tool_code=code, tool_type=policy.tool_type, brand=policy.brand)
            for code, policy in self._rates.items()
        ]

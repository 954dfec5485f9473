from rental.domain.models import CatalogEntry, RentalAgreement
from rental.domain.services.precision_service import PrecisionService
from rental.domain.values import Money

_CATALOG_HEADERS = ("Tool Code", "Tool Type", "Brand")


class AgreementFormatter:
    def __init__(
        self,
        precision_service: PrecisionService,
        currency_symbol: str = "$",
        date_format: str = "%m/%d/%Y",
    ):
        self._precision = precision_service
        self._currency_symbol = currency_symbol
        self._date_format = date_format

    def money(self, amount: Money) -> str:
        return f"{self._currency_symbol}{self._precision.round_money(amount.value):f}"

    def render_agreement(self, agreement: RentalAgreement) -> str:
        """
        Render an agreement the way it is printed for the customer, one
        "Label: value" line per field.
        """
        lines = [
            ("Tool code", agreement.tool_code),
            ("Tool type", agreement.tool_type),
            ("Tool brand", agreement.tool_brand),
            ("Rental days", str(agreement.rental_days)),
            ("Check out date", agreement.checkout_date.strftime(self._date_format)),
            ("Due date", agreement.due_date.strftime(self._date_format)),
            ("Daily rental charge", self.money(agreement.daily_rental_charge)),
            ("Charge days", str(agreement.charge_days)),
            ("Pre-discount charge", self.money(agreement.pre_discount_charge)),
            ("Discount percent", str(agreement.discount_percent)),
            ("Discount amount", self.money(agreement.discount_amount)),
            ("Final charge", self.money(agreement.final_charge)),
        ]

        return "\n".join(f"{label}: {value}" for label, value in lines)

    def render_catalog(self, entries: list[CatalogEntry]) -> str:
        rows = [(e.tool_code, e.tool_type, e.brand) for e in entries]
        widths = [
            max(len(cell) for cell in column)
            for column in zip(_CATALOG_HEADERS, *rows)
        ]

        def fmt(cells) -> str:
            return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

        out = [fmt(_CATALOG_HEADERS), fmt(["-" * w for w in widths])]
        out.extend(fmt(row) for row in rows)

        return "\n".join(out)

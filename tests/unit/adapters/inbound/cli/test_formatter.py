from datetime import date
from decimal import Decimal

import pytest
from rental.adapters.inbound.cli import AgreementFormatter
from rental.adapters.outbound.catalog import InMemoryToolCatalog
from rental.domain.models import CatalogEntry, RentalAgreement
from rental.domain.services.precision_service import PrecisionService
from rental.domain.values import DiscountPercent, Money


@pytest.fixture
def agreement() -> RentalAgreement:
    return RentalAgreement(
        tool_code="CHNS",
        tool_type="Chainsaw",
        tool_brand="Stihl",
        rental_days=2,
        checkout_date=date(2022, 3, 5),
        due_date=date(2022, 3, 7),
        daily_rental_charge=Money(Decimal("1.49")),
        charge_days=1,
        pre_discount_charge=Money(Decimal("1.49")),
        discount_percent=DiscountPercent(Decimal("15")),
        discount_amount=Money(Decimal("0.22")),
        final_charge=Money(Decimal("1.27")),
    )


def test_render_agreement(agreement):
    formatter = AgreementFormatter(PrecisionService())

    assert formatter.render_agreement(agreement).splitlines() == [
        "Tool code: CHNS",
        "Tool type: Chainsaw",
        "Tool brand: Stihl",
        "Rental days: 2",
        "Check out date: 03/05/2022",
        "Due date: 03/07/2022",
        "Daily rental charge: $1.49",
        "Charge days: 1",
        "Pre-discount charge: $1.49",
        "Discount percent: 15%",
        "Discount amount: $0.22",
        "Final charge: $1.27",
    ]


def test_render_agreement_with_custom_symbol_and_date_format(agreement):
    formatter = AgreementFormatter(
        PrecisionService(), currency_symbol="€", date_format="%d.%m.%Y"
    )

    rendered = formatter.render_agreement(agreement)

    assert "Check out date: 05.03.2022" in rendered
    assert "Final charge: €1.27" in rendered


def test_money_always_has_two_decimals():
    formatter = AgreementFormatter(PrecisionService())

    assert formatter.money(Money(Decimal("0"))) == "$0.00"
    assert formatter.money(Money(Decimal("17.9"))) == "$17.90"
    assert formatter.money(Money(Decimal("1234.5"))) == "$1234.50"


def test_render_catalog_aligns_columns():
    formatter = AgreementFormatter(PrecisionService())

    lines = formatter.render_catalog(InMemoryToolCatalog().list_entries()).splitlines()

    assert lines[0] == "Tool Code  Tool Type   Brand"
    assert lines[1] == "---------  ----------  ------"
    assert lines[2] == "LADW       Ladder      Werner"
    assert lines[5] == "JAKR       Jackhammer  Ridgid"
    assert len(lines) == 6


def test_render_empty_catalog_has_only_headers():
    formatter = AgreementFormatter(PrecisionService())

    assert formatter.render_catalog([]).splitlines() == [
        "Tool Code  Tool Type  Brand",
        "---------  ---------  -----",
    ]


def test_render_catalog_widens_for_long_values():
    formatter = AgreementFormatter(PrecisionService())

    rendered = formatter.render_catalog(
        [CatalogEntry("PWRWASHER", "Pressure Washer", "Karcher")]
    )

    assert rendered.splitlines()[2] == "PWRWASHER  Pressure Washer  Karcher"

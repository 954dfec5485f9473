from decimal import ROUND_HALF_UP, Decimal

from dependency_injector import containers, providers

from rental.adapters.inbound.cli.formatter import AgreementFormatter
from rental.adapters.outbound.catalog import DEFAULT_TOOL_RATES, InMemoryToolCatalog
from rental.app.queries import CalculateRentalQueryHandler, ListCatalogQueryHandler
from rental.domain.services import ChargeService, HolidayCalendar
from rental.domain.services.factory import MoneyFactory
from rental.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)
from rental.shared.config import get_settings
from rental.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    precision_policy = providers.Singleton(
        PrecisionPolicy,
        money_precision=Decimal("0.01"),
        rounding_mode=ROUND_HALF_UP,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    money_factory = providers.Singleton(
        MoneyFactory,
        precision_service=precision_service,
    )

    holiday_calendar = providers.Singleton(HolidayCalendar)

    charge_service = providers.Singleton(
        ChargeService,
        holiday_calendar=holiday_calendar,
        money_factory=money_factory,
    )

    tool_catalog = providers.Singleton(
        InMemoryToolCatalog,
        rates=DEFAULT_TOOL_RATES,
    )

    agreement_formatter = providers.Singleton(
        AgreementFormatter,
        precision_service=precision_service,
        currency_symbol=config.currency_symbol,
        date_format=config.date_format,
    )

    calculate_rental_handler = providers.Factory(
        CalculateRentalQueryHandler,
        tool_catalog=tool_catalog,
        charge_service=charge_service,
    )

    list_catalog_handler = providers.Factory(
        ListCatalogQueryHandler,
        tool_catalog=tool_catalog,
    )


def get_container() -> Container:
    settings = get_settings()

    container = Container()

    container.config.from_dict(
        {
            "currency_symbol": settings.CURRENCY_SYMBOL,
            "date_format": settings.DATE_FORMAT,
        }
    )

    logger.debug("di_container_configured", tools=len(DEFAULT_TOOL_RATES))

    return container

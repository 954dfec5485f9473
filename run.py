import sys
from argparse import ArgumentParser, RawTextHelpFormatter
from datetime import date
from typing import Optional

from pydantic import ValidationError

from rental.adapters.inbound.cli import CheckoutRequest, handle_domain_error
from rental.domain.exceptions import DomainException
from rental.shared.config import get_settings
from rental.shared.di import Container, get_container
from rental.shared.logging import configure_logging, get_logger

settings = get_settings()

configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS
)

logger = get_logger(__name__)

SEPARATOR = "=" * 48


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Tool Rental Counter Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    catalog_parser = subparsers.add_parser("catalog", help="List the tools available for rent.")
    catalog_parser.set_defaults(func=run_catalog)

    checkout_parser = subparsers.add_parser(
        "checkout",
        aliases=["rent"],
        help="Price a rental and print the rental agreement."
    )
    checkout_parser.add_argument("--tool", dest="tool_code", required=True, help="Tool code, e.g. LADW")
    checkout_parser.add_argument("--days", dest="rental_days", required=True, help="Rental day count (1 or more)")
    checkout_parser.add_argument("--discount", dest="discount_percent", default="0", help="Discount percent, 0-100")
    checkout_parser.add_argument(
        "--date",
        dest="checkout_date",
        default=None,
        help="Checkout date, YYYY-MM-DD or MM/DD/YYYY (default: today)"
    )
    checkout_parser.set_defaults(func=run_checkout)

    demo_parser = subparsers.add_parser(
        "demo",
        help="Print the catalog and a sample agreement (LADW, 5 days, 10%% off, today)."
    )
    demo_parser.set_defaults(func=run_demo)

    return parser


def run_catalog(args, container: Container) -> None:
    entries = container.list_catalog_handler().handle()
    print(container.agreement_formatter().render_catalog(entries))


def run_checkout(args, container: Container) -> None:
    raw = {
        "tool_code": args.tool_code,
        "rental_days": args.rental_days,
        "discount_percent": args.discount_percent,
    }
    if args.checkout_date is not None:
        raw["checkout_date"] = args.checkout_date

    request = CheckoutRequest(**raw)
    agreement = container.calculate_rental_handler().handle(request.to_query())

    print(container.agreement_formatter().render_agreement(agreement))


def run_demo(args, container: Container) -> None:
    formatter = container.agreement_formatter()

    print(SEPARATOR)
    print(formatter.render_catalog(container.list_catalog_handler().handle()))
    print(SEPARATOR)
    print("Rental Agreement")
    print("----------------")

    agreement = container.calculate_rental_handler().calculate(
        tool_code="LADW",
        rental_day_count=5,
        discount_percent=10,
        checkout_date=date.today(),
    )
    print(formatter.render_agreement(agreement))
    print(SEPARATOR)


def main(argv: Optional[list[str]] = None) -> None:
    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    container = get_container()

    try:
        args.func(args, container)
    except (DomainException, ValidationError) as e:
        error = handle_domain_error(e)
        print(error.message, file=sys.stderr)
        sys.exit(error.exit_code)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            exc_info=True
        )
        print(handle_domain_error(e).message, file=sys.stderr)
        sys.exit(1)

    logger.debug("command_completed", command=args.command)
    sys.exit(0)


if __name__ == "__main__":
    main()

from .error_handler import CliError, handle_domain_error
from .formatter import AgreementFormatter
from .schemas import CheckoutRequest

__all__ = [
    "AgreementFormatter",
    "CheckoutRequest",
    "CliError",
    "handle_domain_error",
]

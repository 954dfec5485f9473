from .rental_agreement import RentalAgreement
from .tool_rate_policy import CatalogEntry, ToolRatePolicy

__all__ = [
    "CatalogEntry",
    "RentalAgreement",
    "ToolRatePolicy",
]

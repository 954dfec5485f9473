from .calculate_rental import CalculateRentalQuery, CalculateRentalQueryHandler
from .list_catalog import ListCatalogQueryHandler

__all__ = [
    "CalculateRentalQuery",
    "CalculateRentalQueryHandler",
    "ListCatalogQueryHandler",
]

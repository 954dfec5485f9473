from .base import DomainException
from .rental import (
    InvalidRentalArgumentError,
    RentalComputationError,
    RentalError,
    UnknownToolCodeError,
)

__all__ = [
    "DomainException",
    "InvalidRentalArgumentError",
    "RentalComputationError",
    "RentalError",
    "UnknownToolCodeError",
]

from .base import DomainException


class RentalError(DomainException):
    pass


class InvalidRentalArgumentError(RentalError, ValueError):
    """Raised when a rental request is rejected before any charge is computed."""

    def __init__(self, reason: str):
        self.reason = reason

        super().__init__(reason)


class UnknownToolCodeError(InvalidRentalArgumentError):
    """Raised when the tool code has no entry in the rate catalog."""

    def __init__(self, tool_code: str):
        self.tool_code = tool_code

        super().__init__(f"Invalid tool code: {tool_code!r}")


class RentalComputationError(RentalError):
    """Raised when charge calculation fails for a reason other than bad input."""

    def __init__(self, message: str = "Error calculating rental cost"):
        super().__init__(message)

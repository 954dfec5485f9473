from dataclasses import dataclass

from pydantic import ValidationError

from rental.domain.exceptions import InvalidRentalArgumentError

EXIT_INTERNAL_ERROR = 1
EXIT_INVALID_INPUT = 2


@dataclass(frozen=True)
class CliError:
    exit_code: int
    message: str


def handle_domain_error(exc: Exception) -> CliError:
    if isinstance(exc, InvalidRentalArgumentError):
        return CliError(exit_code=EXIT_INVALID_INPUT, message=f"Error: {exc}")

    if isinstance(exc, ValidationError):
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return CliError(exit_code=EXIT_INVALID_INPUT, message=f"Error: {problems}")

    return CliError(
        exit_code=EXIT_INTERNAL_ERROR,
        message="Error: an unexpected internal error occurred.",
    )

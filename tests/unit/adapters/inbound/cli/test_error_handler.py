import pytest
from pydantic import ValidationError
from rental.adapters.inbound.cli import CheckoutRequest, handle_domain_error
from rental.adapters.inbound.cli.error_handler import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID_INPUT,
)
from rental.domain.exceptions import (
    InvalidRentalArgumentError,
    RentalComputationError,
    UnknownToolCodeError,
)


def test_invalid_argument_maps_to_input_error():
    error = handle_domain_error(
        InvalidRentalArgumentError("Rental day count must be 1 or greater.")
    )

    assert error.exit_code == EXIT_INVALID_INPUT
    assert error.message == "Error: Rental day count must be 1 or greater."


def test_unknown_tool_maps_to_input_error():
    error = handle_domain_error(UnknownToolCodeError("XXXX"))

    assert error.exit_code == EXIT_INVALID_INPUT
    assert "XXXX" in error.message


def test_validation_error_maps_to_input_error():
    with pytest.raises(ValidationError) as exc_info:
        CheckoutRequest(tool_code="LADW", rental_days="five")

    error = handle_domain_error(exc_info.value)

    assert error.exit_code == EXIT_INVALID_INPUT
    assert "rental_days" in error.message


@pytest.mark.parametrize(
    "exc", [RentalComputationError(), RuntimeError("boom"), KeyError("x")]
)
def test_everything_else_maps_to_generic_internal_error(exc):
    error = handle_domain_error(exc)

    assert error.exit_code == EXIT_INTERNAL_ERROR
    assert error.message == "Error: an unexpected internal error occurred."
    assert "boom" not in error.message

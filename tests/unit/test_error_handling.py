"""Unit tests for error code mapping and the global exception handlers."""

import json
import warnings

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from resource_api.application.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    OperationFailedError,
)
from resource_api.domain.exceptions import InvalidEntityStateException
from resource_api.presentation.error_codes import (
    GENERIC_SERVER_ERROR_MESSAGE,
    get_http_status_for_error_code,
)
from resource_api.presentation.exception_handlers import (
    application_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

pytestmark = pytest.mark.unit


def make_request(method: str = "GET", path: str = "/api/products/1") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


@pytest.mark.parametrize(
    ("error_code", "expected_status"),
    [
        ("INVALID_ARGUMENT", 400),
        ("INVALID_ENTITY_STATE", 400),
        ("NOT_FOUND", 404),
        ("VALIDATION_ERROR", 422),
        ("OPERATION_FAILED", 500),
        ("DATABASE_ERROR", 500),
        ("SOMETHING_NEW", 400),
    ],
)
def test_error_code_to_status(error_code, expected_status):
    """Test each error code maps to its HTTP status; unknown codes default to 400."""
    assert get_http_status_for_error_code(error_code) == expected_status


@pytest.mark.asyncio
async def test_not_found_surfaces_message():
    """Test a not-found error is reported with its own message."""
    exc = EntityNotFoundError("Entity of type Product with ID 9 not found.")

    response = await application_error_handler(make_request(), exc)

    assert response.status_code == 404
    assert json.loads(response.body) == {
        "errorCode": "NOT_FOUND",
        "message": "Entity of type Product with ID 9 not found.",
    }


@pytest.mark.asyncio
async def test_invalid_argument_surfaces_message():
    """Test an invalid argument is a 400 with the validation message."""
    response = await application_error_handler(
        make_request(), InvalidArgumentError("ID must be greater than 0.")
    )

    assert response.status_code == 400
    assert json.loads(response.body)["message"] == "ID must be greater than 0."


@pytest.mark.asyncio
async def test_operation_failure_hides_details(caplog):
    """Test operation failures return the generic message and log the details."""
    try:
        raise RuntimeError("disk full")
    except RuntimeError as cause:
        exc = OperationFailedError("An error occurred while adding the entity.")
        exc.__cause__ = cause

    with caplog.at_level("ERROR"):
        response = await application_error_handler(make_request("POST", "/api/products"), exc)

    body = json.loads(response.body)
    assert response.status_code == 500
    assert body == {"errorCode": "OPERATION_FAILED", "message": GENERIC_SERVER_ERROR_MESSAGE}
    assert "An error occurred while adding the entity." in caplog.text


@pytest.mark.asyncio
async def test_entity_invariant_is_bad_request():
    """Test entity invariant violations are client errors."""
    response = await domain_exception_handler(
        make_request(), InvalidEntityStateException("Price must be zero or positive.")
    )

    assert response.status_code == 400
    assert json.loads(response.body)["errorCode"] == "INVALID_ENTITY_STATE"


@pytest.mark.asyncio
async def test_unhandled_exception_is_generic_500():
    """Test the catch-all handler never leaks the exception text."""
    response = await generic_exception_handler(make_request(), KeyError("secret"))

    body = json.loads(response.body)
    assert response.status_code == 500
    assert body["errorCode"] == "INTERNAL_SERVER_ERROR"
    assert "secret" not in body["message"]


@pytest.mark.asyncio
async def test_validation_error_handler_uses_no_deprecated_status():
    """Test the 422 response is built without deprecated status constants."""
    exc = RequestValidationError(
        [{"loc": ("body", "name"), "msg": "Field required", "type": "missing"}]
    )

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        response = await validation_error_handler(make_request("POST", "/api/products"), exc)

    assert response.status_code == 422
    assert json.loads(response.body) == {
        "errorCode": "VALIDATION_ERROR",
        "message": "Validation failed",
        "errors": [{"field": "body.name", "message": "Field required"}],
    }

"""Exception handlers for converting exceptions to HTTP responses.

Instead of creating individual handlers for each exception, we use
base exception handlers that determine the HTTP status code from the
error_code attribute. Every response body has the shape
``{"errorCode": ..., "message": ...}``.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from resource_api.application.exceptions import ApplicationError
from resource_api.domain.exceptions import DomainException
from resource_api.presentation.error_codes import (
    GENERIC_SERVER_ERROR_MESSAGE,
    HTTP_422_VALIDATION_FAILED,
    get_http_status_for_error_code,
)

logger = logging.getLogger(__name__)


def error_response(http_status: int, error_code: str, message: str, **extra) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=http_status,
        content={"errorCode": error_code, "message": message, **extra},
    )


def _coded_error_response(
    request: Request, exc: ApplicationError | DomainException
) -> JSONResponse:
    http_status = get_http_status_for_error_code(exc.error_code)

    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Log the actual error (and its cause) for debugging, never return it
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return error_response(http_status, exc.error_code, GENERIC_SERVER_ERROR_MESSAGE)

    return error_response(http_status, exc.error_code, exc.message)


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    Invalid-argument and not-found errors surface their message;
    operation failures get a fixed generic message.
    """
    return _coded_error_response(request, exc)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    Usually entity invariant violations raised while building an entity
    from a request body.
    """
    return _coded_error_response(request, exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Returns a list of all validation errors with field locations and messages.
    """
    validation_errors = [
        {
            # Build field path (e.g., "body.name" or "query.page")
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return error_response(
        HTTP_422_VALIDATION_FAILED,
        "VALIDATION_ERROR",
        "Validation failed",
        errors=validation_errors,
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors that escaped the repository layer.

    Returns a standardized error response without exposing internal
    database details.
    """
    logger.error(f"Database error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "DATABASE_ERROR",
        GENERIC_SERVER_ERROR_MESSAGE,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    This is the catch-all handler for any unexpected errors.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        GENERIC_SERVER_ERROR_MESSAGE,
    )

"""Error code to HTTP status code mapping.

This module provides a centralized mapping of error codes to HTTP status codes.
When you add a new exception, simply add its error_code to this mapping.
"""

from fastapi import status

# Message returned for every 5xx response; details only go to the logs.
GENERIC_SERVER_ERROR_MESSAGE = "An error occurred while processing the request."

# Starlette's named 422 constant is deprecated
HTTP_422_VALIDATION_FAILED = 422


# Map error codes to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS = {
    # Client errors
    "INVALID_ARGUMENT": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,

    # Domain errors (invariant violations)
    "INVALID_ENTITY_STATE": status.HTTP_400_BAD_REQUEST,
    "DOMAIN_ERROR": status.HTTP_400_BAD_REQUEST,

    # Application errors
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": HTTP_422_VALIDATION_FAILED,

    # Operation / infrastructure errors
    "OPERATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "STORAGE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """
    Get HTTP status code for a given error code.

    Args:
        error_code: The error code from the exception

    Returns:
        HTTP status code (defaults to 400 if not found)
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(
        error_code,
        status.HTTP_400_BAD_REQUEST,  # Default for unknown errors
    )

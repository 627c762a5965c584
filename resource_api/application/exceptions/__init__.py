"""Application layer exceptions."""

from resource_api.application.exceptions.exceptions import (
    ApplicationError,
    EntityNotFoundError,
    InvalidArgumentError,
    OperationFailedError,
)

__all__ = [
    "ApplicationError",
    "InvalidArgumentError",
    "EntityNotFoundError",
    "OperationFailedError",
]

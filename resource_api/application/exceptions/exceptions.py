"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidArgumentError(ApplicationError):
    """Raised when an id, paging parameter or payload violates a constraint."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, error_code="INVALID_ARGUMENT")


class EntityNotFoundError(ApplicationError):
    """Raised when the referenced entity does not exist."""

    def __init__(self, message: str = "Entity not found"):
        super().__init__(message, error_code="NOT_FOUND")


class OperationFailedError(ApplicationError):
    """
    Raised for any failure that is neither invalid input nor not-found.

    The message carries the operation context for logs; clients only
    ever see a generic message. The cause is chained.
    """

    def __init__(self, message: str = "The operation could not be completed"):
        super().__init__(message, error_code="OPERATION_FAILED")

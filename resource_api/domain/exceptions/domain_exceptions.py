"""Domain layer exceptions for business rule violations and data access failures."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent broken invariants and the failure kinds a
    repository is allowed to report. The application layer translates them
    into application errors; anything that is not a DomainException is an
    unexpected provider failure.

    Examples:
        - Invalid entity state
        - Entity not found
        - Invalid argument passed to a repository
        - Storage failure
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class InvalidArgumentException(DomainException):
    """Raised when a repository receives a malformed or out-of-range argument."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ARGUMENT")


class EntityNotFoundException(DomainException):
    """Raised when the referenced entity id does not exist."""

    def __init__(self, message: str):
        super().__init__(message, error_code="NOT_FOUND")


class RepositoryException(DomainException):
    """
    Raised when the persistence provider fails or rejects a write.

    The original provider exception is chained as ``__cause__`` and is
    never shown to API clients.
    """

    def __init__(self, message: str):
        super().__init__(message, error_code="STORAGE_ERROR")

"""Domain exceptions - invariant violations and repository failure kinds."""

from resource_api.domain.exceptions.domain_exceptions import (
    DomainException,
    EntityNotFoundException,
    InvalidArgumentException,
    InvalidEntityStateException,
    RepositoryException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "InvalidArgumentException",
    "EntityNotFoundException",
    "RepositoryException",
]

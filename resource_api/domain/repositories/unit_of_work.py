"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import Generic

from resource_api.domain.entities.base import TEntity
from resource_api.domain.repositories.base import IRepository


class IUnitOfWork(ABC, Generic[TEntity]):
    """
    Unit of Work interface for managing transactions.

    This interface belongs to the DOMAIN layer because it defines
    the contract for transactional operations that the application
    layer needs, without specifying implementation details.

    A unit of work scopes exactly one resource repository; the layer
    never spans several entity types in one transaction.
    """

    repository: IRepository[TEntity]

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork[TEntity]":
        """
        Enter async context manager.

        This is where the implementation starts a database
        session and binds the repository to it.
        """
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        If exc_type is not None, rollback. Always release the session.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """
        Explicitly rollback the current transaction.

        Used when you need to abort without raising an exception.
        """
        pass

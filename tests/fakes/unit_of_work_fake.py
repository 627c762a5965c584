"""Fake Unit of Work for testing without a database.

This fake UoW provides the same interface as the real one but uses
a fake repository that stores data in memory.
"""

from typing import Generic, Optional

from resource_api.domain.entities.base import TEntity
from resource_api.domain.repositories.unit_of_work import IUnitOfWork
from tests.fakes.repository_fake import FakeRepository


class FakeUnitOfWork(IUnitOfWork[TEntity], Generic[TEntity]):
    """
    In-memory fake implementation of IUnitOfWork.

    The same instance (and repository) is reused across service calls, so
    data written by one call is visible to the next.

    Usage:
        async with FakeUnitOfWork(Product) as uow:
            await uow.repository.add(Product(name="Lamp", price=10.0))
            await uow.commit()
    """

    def __init__(
        self,
        entity_type: type[TEntity],
        initial_entities: Optional[list[TEntity]] = None,
    ):
        """
        Initialize with a fake repository.

        Args:
            entity_type: Entity type managed by the repository
            initial_entities: Optional list of entities to pre-populate the repository
        """
        self.repository = FakeRepository(entity_type, initial_data=initial_entities)

        self.committed = False
        self.rolled_back = False
        self.commit_count = 0
        self._is_active = False

    async def __aenter__(self) -> "FakeUnitOfWork[TEntity]":
        """Enter context."""
        self._is_active = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context, rolling back if an exception occurred."""
        if exc_type is not None:
            await self.rollback()

        self._is_active = False

    async def commit(self) -> None:
        """
        Mark as committed.

        In a fake implementation, data is already persisted to memory,
        so we just track that commit was called.
        """
        if not self._is_active:
            raise RuntimeError("Cannot commit: UoW is not active")

        self.committed = True
        self.rolled_back = False
        self.commit_count += 1

    async def rollback(self) -> None:
        """
        Mark as rolled back.

        Note: The fake repository doesn't actually rollback changes
        since it writes immediately.
        """
        if not self._is_active:
            raise RuntimeError("Cannot rollback: UoW is not active")

        self.rolled_back = True
        self.committed = False

    # Helper methods for testing

    def was_committed(self) -> bool:
        """Check if commit was called (useful for assertions)."""
        return self.committed

    def was_rolled_back(self) -> bool:
        """Check if rollback was called (useful for assertions)."""
        return self.rolled_back

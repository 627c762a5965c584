"""Unit of Work implementation using SQLAlchemy."""

from collections.abc import Callable
from typing import Any, Generic

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resource_api.domain.entities.base import TEntity
from resource_api.domain.repositories.base import IRepository
from resource_api.domain.repositories.unit_of_work import IUnitOfWork

RepositoryFactory = Callable[[AsyncSession], IRepository[TEntity]]


class UnitOfWork(IUnitOfWork[TEntity], Generic[TEntity]):
    """
    SQLAlchemy implementation of Unit of Work.

    This class:
    1. Manages the SQLAlchemy async session lifecycle
    2. Binds the resource repository to that session
    3. Rolls back on exception and always closes the session

    Commits are explicit; a block that never calls ``commit`` leaves
    nothing behind.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: RepositoryFactory,
    ):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
            repository_factory: Builds the repository for a session, e.g.
                ``lambda session: SqlAlchemyRepository(session, ProductModel)``
        """
        self._session_factory = session_factory
        self._repository_factory = repository_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork[TEntity]":
        """
        Start a new database session and initialize the repository.

        Returns:
            Self for context manager usage
        """
        self._session = self._session_factory()
        self.repository = self._repository_factory(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """
        Exit context manager, rolling back if an exception occurred.
        """
        if exc_type is not None:
            await self.rollback()

        # Always close the session
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()

"""Base repository interface following Clean Architecture."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, Optional

from resource_api.domain.entities.base import FieldUpdates, TEntity
from resource_api.domain.entities.page import Page

# Provider-native query primitives. The domain layer never inspects them;
# the SQLAlchemy implementation expects a boolean column expression and
# loader options (e.g. ``selectinload(...)``).
Filter = Any
Include = Any


class IRepository(ABC, Generic[TEntity]):
    """
    Base repository interface defining standard CRUD operations.

    This interface belongs to the DOMAIN layer and defines the contract
    for data access without any implementation details. It is the only
    component allowed to talk to the persistence provider.

    Failure kinds:
        InvalidArgumentException: malformed id or paging arguments
        EntityNotFoundException: referenced id does not exist
        RepositoryException: the provider failed or rejected the write

    Type Parameters:
        TEntity: The domain entity type this repository manages
    """

    entity_type: type[TEntity]

    @abstractmethod
    async def get_all(
        self,
        page: int = 1,
        page_size: int = 10,
        where: Optional[Filter] = None,
        includes: Sequence[Include] = (),
    ) -> Page[TEntity]:
        """
        Retrieve one page of entities.

        Args:
            page: 1-based page number
            page_size: Maximum number of entities on the page
            where: Optional filter predicate applied before counting
            includes: Optional eager-load hints for related data

        Returns:
            Page whose total_count is computed over the filtered set
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        id: int,
        where: Optional[Filter] = None,
        includes: Sequence[Include] = (),
    ) -> TEntity:
        """
        Retrieve an entity by its ID.

        Args:
            id: The unique identifier (must be positive)
            where: Optional extra filter predicate
            includes: Optional eager-load hints

        Returns:
            The matching entity

        Raises:
            EntityNotFoundException: If no entity matches
        """
        pass

    @abstractmethod
    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity.

        Args:
            entity: The entity to add

        Returns:
            The added entity with generated fields (like ID)
        """
        pass

    @abstractmethod
    async def update(self, entity: TEntity) -> TEntity:
        """
        Replace every mutable field of an existing entity.

        Args:
            entity: The entity to update; its id selects the row

        Returns:
            The updated entity as stored
        """
        pass

    @abstractmethod
    async def update_fields(
        self, entity: TEntity, fields_to_update: FieldUpdates
    ) -> TEntity:
        """
        Apply a partial update.

        Args:
            entity: The entity to update; only its id is used
            fields_to_update: Mapping of field name to new value

        Returns:
            The updated entity as stored

        Raises:
            EntityNotFoundException: If the id does not exist
            RepositoryException: If a key is not a mutable field
        """
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """
        Delete an entity by ID.

        Args:
            id: The unique identifier

        Raises:
            EntityNotFoundException: If the id does not exist
        """
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """
        Check if an entity exists.

        Non-positive ids return False without querying storage.

        Args:
            id: The unique identifier

        Returns:
            True if exists, False otherwise
        """
        pass

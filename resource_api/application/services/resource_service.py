"""Generic resource service - application layer validation and error translation."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Generic, Optional

from resource_api.application.exceptions import (
    ApplicationError,
    EntityNotFoundError,
    InvalidArgumentError,
    OperationFailedError,
)
from resource_api.domain.entities.base import FieldUpdates, TEntity
from resource_api.domain.entities.page import Page
from resource_api.domain.exceptions import (
    EntityNotFoundException,
    InvalidArgumentException,
    InvalidEntityStateException,
)
from resource_api.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class ResourceService(Generic[TEntity]):
    """
    CRUD use cases for one entity type.

    This service:
    1. Depends on the IUnitOfWork abstraction (not a concrete implementation)
    2. Re-validates every argument, even if the controller or repository
       also does, so subclasses can override methods safely
    3. Keeps "not found" and "invalid argument" distinct and collapses
       every other failure into OperationFailedError (cause chained)

    Derived services attach per-entity business rules by overriding
    methods and calling ``super()``.
    """

    def __init__(
        self,
        entity_type: type[TEntity],
        uow_factory: Callable[[], IUnitOfWork[TEntity]],
    ):
        """
        Initialize service with dependencies.

        Args:
            entity_type: Domain entity class, used in error messages
            uow_factory: Factory function that returns IUnitOfWork instances

        Example:
            # Production
            service = ResourceService(
                Product,
                uow_factory=lambda: UnitOfWork(session_factory, repository_factory),
            )

            # Testing
            service = ResourceService(Product, uow_factory=lambda: FakeUnitOfWork())
        """
        self._entity_type = entity_type
        self._uow_factory = uow_factory

    @property
    def entity_name(self) -> str:
        return self._entity_type.__name__

    async def get_all(self, page: int = 1, page_size: int = 10) -> Page[TEntity]:
        """
        Retrieve one page of entities.

        Raises:
            InvalidArgumentError: If page or page_size is below 1
            OperationFailedError: If the repository fails
        """
        self._validate_pagination(page, page_size)

        async with self._translate_errors("retrieving entities"):
            async with self._uow_factory() as uow:
                return await uow.repository.get_all(page, page_size)

    async def get_by_id(self, id: int) -> TEntity:
        """
        Retrieve an entity by ID.

        Raises:
            InvalidArgumentError: If id is not positive
            EntityNotFoundError: If the entity doesn't exist
        """
        self._validate_id(id)

        async with self._translate_errors(f"retrieving entity with ID {id}"):
            async with self._uow_factory() as uow:
                return await uow.repository.get_by_id(id)

    async def add(self, entity: Optional[TEntity]) -> TEntity:
        """
        Persist a new entity.

        Returns:
            The created entity with its assigned id

        Raises:
            InvalidArgumentError: If entity is None
        """
        self._validate_entity(entity)

        async with self._translate_errors("adding the entity"):
            async with self._uow_factory() as uow:
                created = await uow.repository.add(entity)
                await uow.commit()
                logger.info("Created %s with ID %s", self.entity_name, created.id)
                return created

    async def update(self, entity: Optional[TEntity]) -> TEntity:
        """
        Replace an existing entity.

        Returns:
            The updated entity as stored

        Raises:
            InvalidArgumentError: If entity is None or has no positive id
            EntityNotFoundError: If the entity doesn't exist
        """
        self._validate_entity(entity)
        self._validate_id(entity.id)

        async with self._translate_errors(f"updating the entity with ID {entity.id}"):
            async with self._uow_factory() as uow:
                if not await uow.repository.exists(entity.id):
                    raise self._not_found(entity.id)

                updated = await uow.repository.update(entity)
                await uow.commit()
                return updated

    async def update_fields(
        self, entity: Optional[TEntity], fields_to_update: Optional[FieldUpdates]
    ) -> TEntity:
        """
        Apply a partial update to an existing entity.

        Returns:
            The entity re-read after the update

        Raises:
            InvalidArgumentError: If entity is None, has no positive id, or
                fields_to_update is None/empty
            EntityNotFoundError: If the entity doesn't exist
            OperationFailedError: If a field is unknown or the write fails
        """
        self._validate_entity(entity)
        self._validate_id(entity.id)
        self._validate_fields_to_update(fields_to_update)

        async with self._translate_errors(
            f"updating fields for the entity with ID {entity.id}"
        ):
            async with self._uow_factory() as uow:
                if not await uow.repository.exists(entity.id):
                    raise self._not_found(entity.id)

                updated = await uow.repository.update_fields(entity, fields_to_update)
                await uow.commit()
                return updated

    async def delete(self, id: int) -> None:
        """
        Delete an entity.

        Raises:
            InvalidArgumentError: If id is not positive
            EntityNotFoundError: If the entity doesn't exist
        """
        self._validate_id(id)

        async with self._translate_errors(f"deleting the entity with ID {id}"):
            async with self._uow_factory() as uow:
                if not await uow.repository.exists(id):
                    raise self._not_found(id)

                await uow.repository.delete(id)
                await uow.commit()
                logger.info("Deleted %s with ID %s", self.entity_name, id)

    async def exists(self, id: int) -> bool:
        """
        Check whether an entity exists.

        Raises:
            InvalidArgumentError: If id is not positive
        """
        self._validate_id(id)

        async with self._translate_errors(f"checking existence of the entity with ID {id}"):
            async with self._uow_factory() as uow:
                return await uow.repository.exists(id)

    @asynccontextmanager
    async def _translate_errors(self, action: str) -> AsyncIterator[None]:
        """Map repository failures onto application errors."""
        try:
            yield
        except (ApplicationError, InvalidEntityStateException):
            raise
        except EntityNotFoundException as exc:
            raise EntityNotFoundError(exc.message) from exc
        except InvalidArgumentException as exc:
            raise InvalidArgumentError(exc.message) from exc
        except Exception as exc:
            raise OperationFailedError(f"An error occurred while {action}.") from exc

    def _not_found(self, id: int) -> EntityNotFoundError:
        return EntityNotFoundError(f"Entity of type {self.entity_name} with ID {id} not found.")

    @staticmethod
    def _validate_id(id: Optional[int]) -> None:
        if id is None or id <= 0:
            raise InvalidArgumentError("ID must be greater than 0.")

    @staticmethod
    def _validate_entity(entity: Optional[TEntity]) -> None:
        if entity is None:
            raise InvalidArgumentError("Entity cannot be null.")

    @staticmethod
    def _validate_pagination(page: int, page_size: int) -> None:
        if page < 1:
            raise InvalidArgumentError("Page number must be greater than or equal to 1.")

        if page_size < 1:
            raise InvalidArgumentError("Page size must be greater than or equal to 1.")

    @staticmethod
    def _validate_fields_to_update(fields_to_update: Optional[FieldUpdates]) -> None:
        if not fields_to_update:
            raise InvalidArgumentError(
                "The 'fields_to_update' mapping cannot be null or empty."
            )

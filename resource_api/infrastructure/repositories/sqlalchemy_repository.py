"""Generic repository implementation using SQLAlchemy."""

import logging
from collections.abc import Sequence
from typing import Any, Generic, Optional

from sqlalchemy import func, select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError

from resource_api.domain.entities.base import FieldUpdates, TEntity
from resource_api.domain.entities.page import Page
from resource_api.domain.exceptions import (
    EntityNotFoundException,
    InvalidArgumentException,
    RepositoryException,
)
from resource_api.domain.repositories.base import Filter, Include, IRepository
from resource_api.infrastructure.persistence.models.base import MAX_ID, EntityModel

logger = logging.getLogger(__name__)


class SqlAlchemyRepository(IRepository[TEntity], Generic[TEntity]):
    """
    SQLAlchemy implementation of IRepository for any EntityModel.

    This class contains all database-specific code. It returns domain
    entities and never exposes ORM models to the application layer.

    Every provider error is wrapped in RepositoryException with the
    original exception chained; not-found is reported as
    EntityNotFoundException.

    Usage:
        repo = SqlAlchemyRepository(session, ProductModel)
        page = await repo.get_all(page=2, page_size=20, where=ProductModel.price > 10)
    """

    def __init__(self, session: AsyncSession, model: type[EntityModel]):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
            model: ORM model class backing the entity type
        """
        self._session = session
        self._model = model
        self.entity_type = model.__entity__

    @property
    def entity_name(self) -> str:
        return self.entity_type.__name__

    async def get_all(
        self,
        page: int = 1,
        page_size: int = 10,
        where: Optional[Filter] = None,
        includes: Sequence[Include] = (),
    ) -> Page[TEntity]:
        """Get one page of entities; total_count covers the filtered set."""
        if page < 1 or page_size < 1:
            raise InvalidArgumentException(
                "Page number and page size must be greater than or equal to 1."
            )

        count_query = select(func.count()).select_from(self._model)
        query = select(self._model)
        if where is not None:
            count_query = count_query.where(where)
            query = query.where(where)
        if includes:
            query = query.options(*includes)

        # An offset past the widest id cannot match a row
        offset = (page - 1) * page_size
        query = query.offset(offset).limit(min(page_size, MAX_ID))

        try:
            total_count = (await self._session.execute(count_query)).scalar_one()
            models = []
            if offset <= MAX_ID:
                result = await self._session.execute(query)
                models = result.scalars().unique().all()
        except SQLAlchemyError as exc:
            raise RepositoryException("Failed to retrieve data.") from exc

        return Page(
            items=[model.to_entity() for model in models],
            current_page=page,
            page_size=page_size,
            total_count=total_count,
        )

    async def get_by_id(
        self,
        id: int,
        where: Optional[Filter] = None,
        includes: Sequence[Include] = (),
    ) -> TEntity:
        """Get entity by ID."""
        model = await self._load(id, where=where, includes=includes)
        return model.to_entity()

    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity.

        Note: We convert domain entity -> ORM model, persist it,
        then convert back to domain entity.
        """
        model = self._model.from_entity(entity)

        try:
            self._session.add(model)
            await self._session.flush()  # Get generated ID without committing
            await self._session.refresh(model)  # Load database defaults
        except SQLAlchemyError as exc:
            raise RepositoryException("Failed to add entity.") from exc

        logger.debug("Inserted %s with ID %s", self.entity_name, model.id)
        return model.to_entity()

    async def update(self, entity: TEntity) -> TEntity:
        """
        Replace every mutable column of an existing row.

        A single conditional UPDATE; zero matched rows means the entity
        vanished after the caller's existence check.
        """
        if entity.id > MAX_ID:
            raise self._not_found(entity.id)

        values = self._model.values_from_entity(entity)
        statement = (
            sql_update(self._model)
            .where(self._model.id == entity.id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        try:
            result = await self._session.execute(statement)
        except SQLAlchemyError as exc:
            raise RepositoryException(f"Failed to update entity with ID {entity.id}.") from exc

        if result.rowcount == 0:
            raise self._not_found(entity.id)

        logger.debug("Updated %s with ID %s", self.entity_name, entity.id)
        return await self._reload(entity.id)

    async def update_fields(
        self, entity: TEntity, fields_to_update: FieldUpdates
    ) -> TEntity:
        """Load the row, assign each field and flag it modified, then flush."""
        model = await self._load(entity.id)
        mutable_fields = set(self._model.mutable_fields())

        for key, value in fields_to_update.items():
            if key not in mutable_fields:
                raise RepositoryException(
                    f"'{key}' is not a mutable field of {self.entity_name}."
                )
            setattr(model, key, value)
            flag_modified(model, key)

        # Entity invariants are checked before anything reaches the database
        model.to_entity()

        try:
            await self._session.flush()
            await self._session.refresh(model)
        except StaleDataError as exc:
            raise self._not_found(entity.id) from exc
        except SQLAlchemyError as exc:
            raise RepositoryException(
                f"Failed to update fields for entity with ID {entity.id}."
            ) from exc

        logger.debug(
            "Updated fields %s of %s with ID %s",
            sorted(fields_to_update),
            self.entity_name,
            entity.id,
        )
        return model.to_entity()

    async def delete(self, id: int) -> None:
        """Delete entity by ID."""
        model = await self._load(id)

        try:
            await self._session.delete(model)
            await self._session.flush()
        except StaleDataError as exc:
            raise self._not_found(id) from exc
        except SQLAlchemyError as exc:
            raise RepositoryException(f"Failed to delete entity with ID {id}.") from exc

        logger.debug("Deleted %s with ID %s", self.entity_name, id)

    async def exists(self, id: int) -> bool:
        """Check if entity exists; ids outside the id column range never touch the database."""
        if id is None or id <= 0 or id > MAX_ID:
            return False

        try:
            result = await self._session.execute(
                select(self._model.id).where(self._model.id == id)
            )
        except SQLAlchemyError as exc:
            raise RepositoryException(
                f"Failed to check existence of entity with ID {id}."
            ) from exc

        return result.scalar_one_or_none() is not None

    async def _load(
        self,
        id: int,
        where: Optional[Filter] = None,
        includes: Sequence[Include] = (),
    ) -> Any:
        """Fetch the ORM row for ``id`` or raise EntityNotFoundException."""
        if id is None or id <= 0:
            raise InvalidArgumentException("ID must be greater than 0.")
        if id > MAX_ID:
            raise self._not_found(id)

        query = select(self._model).where(self._model.id == id)
        if where is not None:
            query = query.where(where)
        if includes:
            query = query.options(*includes)

        try:
            result = await self._session.execute(query)
            model = result.scalars().unique().one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryException(f"Failed to retrieve entity with ID {id}.") from exc

        if model is None:
            raise self._not_found(id)

        return model

    async def _reload(self, id: int) -> TEntity:
        try:
            model = await self._session.get(self._model, id, populate_existing=True)
        except SQLAlchemyError as exc:
            raise RepositoryException(f"Failed to retrieve entity with ID {id}.") from exc

        if model is None:
            raise self._not_found(id)

        return model.to_entity()

    def _not_found(self, id: int) -> EntityNotFoundException:
        return EntityNotFoundException(
            f"Entity of type {self.entity_name} with ID {id} not found."
        )

"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use SqlAlchemyRepository + UnitOfWork (not another persistence provider)
- Which ORM model backs each resource
- Use Settings from environment (not hardcoded config)

The application layer doesn't know or care about these choices - it only
knows about interfaces.
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from resource_api.application.services.resource_service import ResourceService
from resource_api.domain.repositories.base import IRepository
from resource_api.domain.repositories.unit_of_work import IUnitOfWork
from resource_api.infrastructure.config.settings import Settings, get_settings
from resource_api.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from resource_api.infrastructure.persistence.models import CategoryModel, ProductModel
from resource_api.infrastructure.persistence.models.base import EntityModel
from resource_api.infrastructure.repositories.sqlalchemy_repository import SqlAlchemyRepository
from resource_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork

# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton.

    Args:
        settings: Application settings (injected)

    Returns:
        AsyncEngine instance
    """
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton.

    Tests override this dependency to point every resource at a test database.

    Args:
        engine: Database engine (injected)

    Returns:
        Session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


async def dispose_database_engine() -> None:
    """Close pooled connections and forget the singletons (app shutdown)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def resource_service_provider(
    model: type[EntityModel],
    service_class: type[ResourceService] = ResourceService,
) -> Callable[..., ResourceService]:
    """
    Build the FastAPI dependency that provides the service of one resource.

    Each service call opens its own UnitOfWork (session + transaction) on
    a repository bound to ``model``.

    Args:
        model: ORM model backing the resource
        service_class: ResourceService subclass carrying custom business rules

    Returns:
        Dependency callable for ``Depends(...)``

    Dependency Graph:
        FastAPI endpoint
            → get_<resource>_service()
                → get_session_factory() → get_database_engine() → Settings
    """

    def repository_factory(session: AsyncSession) -> IRepository:
        return SqlAlchemyRepository(session, model)

    def get_service(
        session_factory: async_sessionmaker = Depends(get_session_factory),
    ) -> ResourceService:
        def uow_factory() -> IUnitOfWork:
            return UnitOfWork(session_factory, repository_factory)

        return service_class(model.__entity__, uow_factory=uow_factory)

    return get_service


get_product_service = resource_service_provider(ProductModel)
get_category_service = resource_service_provider(CategoryModel)

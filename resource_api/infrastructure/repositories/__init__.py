"""Repository implementations using SQLAlchemy."""

from resource_api.infrastructure.repositories.sqlalchemy_repository import SqlAlchemyRepository
from resource_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork

__all__ = ["SqlAlchemyRepository", "UnitOfWork"]

"""Repository interfaces - define contracts for data access."""

from resource_api.domain.repositories.base import Filter, Include, IRepository
from resource_api.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["Filter", "Include", "IRepository", "IUnitOfWork"]

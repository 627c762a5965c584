"""Fake implementations for testing."""

from tests.fakes.repository_fake import FakeRepository
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

__all__ = ["FakeRepository", "FakeUnitOfWork"]

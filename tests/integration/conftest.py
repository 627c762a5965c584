"""Integration test fixtures.

Provides fixtures for integration testing with real database and FastAPI client.
Uses a throwaway SQLite file per test; NullPool opens a fresh connection for
every session so the test client's event loop never reuses one created here.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from resource_api.infrastructure.persistence import models  # noqa: F401
from resource_api.infrastructure.persistence.database import (
    Base,
    create_session_factory,
)
from resource_api.main import app
from resource_api.presentation.dependencies import get_session_factory


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine backed by a temporary SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def client(test_session_factory) -> Generator[TestClient]:
    """
    Create a FastAPI test client with test database.

    This client uses the real application but with a temporary database.
    """

    # Override the session factory dependency
    def override_get_session_factory():
        return test_session_factory

    app.dependency_overrides[get_session_factory] = override_get_session_factory

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()

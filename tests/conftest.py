"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakeUnitOfWork, FakeRepository)
- Tests run fast (no database)
- Tests are isolated (each test gets fresh fakes)
"""

from datetime import UTC, datetime

import pytest

from resource_api.application.services.resource_service import ResourceService
from resource_api.domain.entities.product import Product
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def sample_product() -> Product:
    """Create a sample persisted product for testing."""
    return Product(
        id=1,
        name="Product 1",
        price=10.99,
        description="First product",
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )


@pytest.fixture
def another_product() -> Product:
    """Create another sample product for testing."""
    return Product(
        id=2,
        name="Product 2",
        price=25.0,
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow() -> FakeUnitOfWork[Product]:
    """
    Provide a fresh FakeUnitOfWork for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUnitOfWork(Product)


@pytest.fixture
def fake_uow_with_products(sample_product, another_product) -> FakeUnitOfWork[Product]:
    """
    Provide a FakeUnitOfWork pre-populated with products.

    Useful for testing operations on existing data.
    """
    return FakeUnitOfWork(Product, initial_entities=[sample_product, another_product])


@pytest.fixture
def product_service(fake_uow) -> ResourceService[Product]:
    """
    Provide a product service backed by an empty fake unit of work.

    Tests run fast and are fully deterministic.
    """

    def uow_factory():
        return fake_uow

    return ResourceService(Product, uow_factory=uow_factory)


@pytest.fixture
def product_service_with_data(fake_uow_with_products) -> ResourceService[Product]:
    """
    Provide a product service with pre-populated data.

    Useful for testing operations on existing products.
    """

    def uow_factory():
        return fake_uow_with_products

    return ResourceService(Product, uow_factory=uow_factory)

"""Integration tests for SqlAlchemyRepository against a real SQLite database."""

import pytest

from resource_api.domain.entities.category import Category
from resource_api.domain.entities.product import Product
from resource_api.domain.exceptions import (
    EntityNotFoundException,
    InvalidArgumentException,
    InvalidEntityStateException,
    RepositoryException,
)
from resource_api.infrastructure.persistence.models import CategoryModel, ProductModel
from resource_api.infrastructure.repositories.sqlalchemy_repository import SqlAlchemyRepository

pytestmark = pytest.mark.integration


async def seed_products(repo: SqlAlchemyRepository, count: int) -> list[Product]:
    return [
        await repo.add(Product(name=f"Product {i}", price=float(i * 5)))
        for i in range(1, count + 1)
    ]


@pytest.mark.asyncio
async def test_add_assigns_id_and_timestamps(test_session):
    """Test the database assigns the id and the creation timestamps."""
    repo = SqlAlchemyRepository(test_session, ProductModel)

    created = await repo.add(Product(name="Lamp", price=12.5))

    assert created.id is not None
    assert created.created_at is not None
    assert created.updated_at is not None
    assert await repo.get_by_id(created.id) == created


@pytest.mark.asyncio
async def test_get_all_pages_share_total_count(test_session):
    """Test paging slices the items while total_count stays constant."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    await seed_products(repo, 5)

    first = await repo.get_all(page=1, page_size=2)
    third = await repo.get_all(page=3, page_size=2)
    past_end = await repo.get_all(page=4, page_size=2)

    assert len(first.items) == 2
    assert len(third.items) == 1
    assert past_end.items == []
    assert first.total_count == third.total_count == past_end.total_count == 5
    assert first.total_pages == 3


@pytest.mark.asyncio
async def test_get_all_filter_applies_to_items_and_count(test_session):
    """Test a filter narrows both the page and its total."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    await seed_products(repo, 5)

    page = await repo.get_all(page=1, page_size=10, where=ProductModel.price > 10)

    assert page.total_count == 3
    assert all(p.price > 10 for p in page.items)


@pytest.mark.asyncio
async def test_get_all_invalid_pagination(test_session):
    """Test the repository rejects non-positive paging."""
    repo = SqlAlchemyRepository(test_session, ProductModel)

    with pytest.raises(InvalidArgumentException):
        await repo.get_all(page=0, page_size=10)


@pytest.mark.asyncio
async def test_get_by_id_with_filter(test_session):
    """Test a filter that excludes the row reports not found."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    with pytest.raises(EntityNotFoundException) as exc_info:
        await repo.get_by_id(product.id, where=ProductModel.price > 100)

    assert exc_info.value.message == f"Entity of type Product with ID {product.id} not found."


@pytest.mark.asyncio
async def test_update_replaces_mutable_fields(test_session):
    """Test a full replace rewrites every mutable column."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    updated = await repo.update(
        Product(id=product.id, name="Renamed", price=99.0, description="New")
    )

    assert updated.name == "Renamed"
    assert updated.price == 99.0
    assert updated.description == "New"
    assert updated.created_at == product.created_at


@pytest.mark.asyncio
async def test_update_missing_row(test_session):
    """Test replacing a row that does not exist."""
    repo = SqlAlchemyRepository(test_session, ProductModel)

    with pytest.raises(EntityNotFoundException):
        await repo.update(Product(id=404, name="Ghost", price=1.0))


@pytest.mark.asyncio
async def test_update_fields_changes_only_named_fields(test_session):
    """Test a partial update leaves other columns untouched."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    updated = await repo.update_fields(product, {"price": 18.99})

    assert updated.price == 18.99
    assert updated.name == product.name
    assert (await repo.get_by_id(product.id)).price == 18.99


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["colour", "id", "created_at"])
async def test_update_fields_rejects_unknown_and_immutable_fields(test_session, field):
    """Test non-mutable field names are storage failures."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    with pytest.raises(RepositoryException) as exc_info:
        await repo.update_fields(product, {field: 1})

    assert exc_info.value.message == f"'{field}' is not a mutable field of Product."


@pytest.mark.asyncio
async def test_update_fields_checks_entity_invariants(test_session):
    """Test a partial update cannot break entity invariants."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    with pytest.raises(InvalidEntityStateException):
        await repo.update_fields(product, {"name": ""})


@pytest.mark.asyncio
async def test_delete_then_exists(test_session):
    """Test a deleted row no longer exists."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    [product] = await seed_products(repo, 1)

    await repo.delete(product.id)

    assert not await repo.exists(product.id)
    with pytest.raises(EntityNotFoundException):
        await repo.delete(product.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("invalid_id", [0, -1, None])
async def test_exists_non_positive_id_is_false(test_session, invalid_id):
    """Test non-positive ids never exist."""
    repo = SqlAlchemyRepository(test_session, ProductModel)

    assert await repo.exists(invalid_id) is False


@pytest.mark.asyncio
async def test_duplicate_category_name_is_storage_failure(test_session):
    """Test constraint violations are wrapped with the provider error chained."""
    repo = SqlAlchemyRepository(test_session, CategoryModel)
    await repo.add(Category(name="Lighting"))

    with pytest.raises(RepositoryException) as exc_info:
        await repo.add(Category(name="Lighting"))

    assert exc_info.value.message == "Failed to add entity."
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_id_beyond_column_range_is_missing(test_session):
    """Test ids wider than a signed 64-bit column never reach the database."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    too_wide = 2**63

    assert await repo.exists(too_wide) is False
    with pytest.raises(EntityNotFoundException):
        await repo.get_by_id(too_wide)
    with pytest.raises(EntityNotFoundException):
        await repo.update(Product(id=too_wide, name="Ghost", price=1.0))
    with pytest.raises(EntityNotFoundException):
        await repo.delete(too_wide)


@pytest.mark.asyncio
async def test_get_all_offset_beyond_column_range(test_session):
    """Test a window past every possible row is empty but keeps the total."""
    repo = SqlAlchemyRepository(test_session, ProductModel)
    await seed_products(repo, 2)

    page = await repo.get_all(page=10**18, page_size=10)
    huge_window = await repo.get_all(page=1, page_size=10**20)

    assert page.items == []
    assert page.total_count == 2
    assert len(huge_window.items) == 2

"""Product ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Float, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.domain.entities.product import Product
from resource_api.infrastructure.persistence.models.base import EntityModel, IdType


class ProductModel(EntityModel):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"
    __entity__ = Product
    __immutable_fields__ = frozenset({"id", "created_at", "updated_at"})

    # Primary key
    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # Product information
    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of ProductModel."""
        return f"ProductModel(id={self.id!r}, name={self.name!r}, price={self.price!r})"

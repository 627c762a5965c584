"""Category ORM model."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.domain.entities.category import Category
from resource_api.infrastructure.persistence.models.base import EntityModel, IdType


class CategoryModel(EntityModel):
    """SQLAlchemy ORM model for categories table."""

    __tablename__ = "categories"
    __entity__ = Category

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

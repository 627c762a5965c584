"""Product domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from resource_api.domain.entities.base import BaseEntity
from resource_api.domain.exceptions import InvalidEntityStateException


@dataclass(kw_only=True)
class Product(BaseEntity):
    """
    Product sold in the catalogue.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. Timestamps are maintained by the database.
    """

    name: str
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate entity invariants at construction time."""
        if not self.name or len(self.name.strip()) == 0:
            raise InvalidEntityStateException(
                "Name cannot be empty. Product must have a valid name."
            )

        if self.price is None or self.price < 0:
            raise InvalidEntityStateException(
                f"Invalid price: {self.price!r}. Price must be zero or positive."
            )

"""Product DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BeforeValidator, ConfigDict, Field

from resource_api.application.dtos.base import (
    EntityReadDTO,
    EntityWriteDTO,
    strip_whitespace,
)
from resource_api.domain.entities.product import Product


class ProductWriteDTO(EntityWriteDTO):
    """
    DTO for creating or replacing a product.

    Validation:
    - name: Cannot be empty, whitespace is automatically trimmed
    - price: Must be zero or positive
    - description: Optional free text
    """

    __entity__ = Product

    name: Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1, max_length=255)]
    price: Annotated[float, Field(ge=0)]
    description: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Product 1",
                "price": 10.99,
                "description": "First product in the catalogue",
            }
        },
    )


class ProductDTO(EntityReadDTO):
    """DTO for returning product data to presentation layer."""

    name: str
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

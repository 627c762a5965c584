"""Category DTOs."""

from typing import Annotated, Optional

from pydantic import BeforeValidator, Field

from resource_api.application.dtos.base import (
    EntityReadDTO,
    EntityWriteDTO,
    strip_whitespace,
)
from resource_api.domain.entities.category import Category


class CategoryWriteDTO(EntityWriteDTO):
    """DTO for creating or replacing a category."""

    __entity__ = Category

    name: Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1, max_length=120)]
    description: Optional[str] = None


class CategoryDTO(EntityReadDTO):
    """DTO for returning category data."""

    name: str
    description: Optional[str] = None

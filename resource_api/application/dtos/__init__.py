"""Data Transfer Objects for application layer."""

from resource_api.application.dtos.base import EntityReadDTO, EntityWriteDTO
from resource_api.application.dtos.category_dto import CategoryDTO, CategoryWriteDTO
from resource_api.application.dtos.product_dto import ProductDTO, ProductWriteDTO

__all__ = [
    "EntityReadDTO",
    "EntityWriteDTO",
    "CategoryDTO",
    "CategoryWriteDTO",
    "ProductDTO",
    "ProductWriteDTO",
]

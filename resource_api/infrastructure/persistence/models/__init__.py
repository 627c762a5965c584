"""ORM models. Importing this package registers every table on Base.metadata."""

from resource_api.infrastructure.persistence.models.base import EntityModel
from resource_api.infrastructure.persistence.models.category_model import CategoryModel
from resource_api.infrastructure.persistence.models.product_model import ProductModel

__all__ = ["EntityModel", "CategoryModel", "ProductModel"]

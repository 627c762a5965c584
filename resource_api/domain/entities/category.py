"""Category domain entity."""

from dataclasses import dataclass
from typing import Optional

from resource_api.domain.entities.base import BaseEntity
from resource_api.domain.exceptions import InvalidEntityStateException


@dataclass(kw_only=True)
class Category(BaseEntity):
    """Catalogue category."""

    name: str
    description: Optional[str] = None

    def __post_init__(self):
        if not self.name or len(self.name.strip()) == 0:
            raise InvalidEntityStateException(
                "Name cannot be empty. Category must have a valid name."
            )

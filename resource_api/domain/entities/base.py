"""Entity base contract shared by every resource the API can manage."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Protocol, TypeVar, Union


class Identifiable(Protocol):
    """
    Minimal shape of a manageable resource.

    Repositories, services and controllers only ever read ``id``. A value of
    ``None`` (or 0) means the entity has not been persisted yet.
    """

    id: Optional[int]


@dataclass(kw_only=True)
class BaseEntity:
    """
    Convenience base for dataclass entities.

    Subclasses declare their business fields as keyword-only dataclass
    fields; ``id`` is assigned by the persistence provider on creation
    and is immutable afterwards.
    """

    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        """True once the provider has assigned a positive id."""
        return self.id is not None and self.id > 0


# Generic type for domain entities
TEntity = TypeVar("TEntity", bound=Identifiable)

# Values accepted in a partial update; the column type decides what is valid.
FieldValue = Union[str, int, float, bool, None]
FieldUpdates = Mapping[str, FieldValue]

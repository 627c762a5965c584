"""Generic ORM <-> domain entity mapping shared by all resource models."""

from dataclasses import fields
from typing import Any, ClassVar

from sqlalchemy import BigInteger, Integer, inspect

from resource_api.infrastructure.persistence.database import Base

# Signed 64-bit primary keys; SQLite keeps INTEGER so the id aliases its rowid.
IdType = BigInteger().with_variant(Integer, "sqlite")
MAX_ID = 2**63 - 1


class EntityModel(Base):
    """
    Abstract base for ORM models that back a domain entity.

    Subclasses map a table, declare an integer ``id`` primary key, point
    ``__entity__`` at the domain dataclass and list the columns clients may
    not write in ``__immutable_fields__``. Entity field names must equal
    the model's column attribute keys.

    The domain layer never imports this class.
    """

    __abstract__ = True

    __entity__: ClassVar[type]
    __immutable_fields__: ClassVar[frozenset[str]] = frozenset({"id"})

    @classmethod
    def column_names(cls) -> list[str]:
        """Mapped column attribute keys, in declaration order."""
        return [attr.key for attr in inspect(cls).column_attrs]

    @classmethod
    def mutable_fields(cls) -> list[str]:
        """Columns that create, update and partial update may write."""
        return [name for name in cls.column_names() if name not in cls.__immutable_fields__]

    def to_entity(self) -> Any:
        """
        Convert ORM model to domain entity.

        Only columns the entity declares are passed; the entity validates
        its own invariants on construction.

        Returns:
            Domain entity
        """
        entity_fields = {f.name for f in fields(self.__entity__)}
        values = {
            name: getattr(self, name)
            for name in self.column_names()
            if name in entity_fields
        }
        return self.__entity__(**values)

    @classmethod
    def from_entity(cls, entity: Any) -> "EntityModel":
        """
        Create ORM model from domain entity.

        Immutable columns (timestamps and the like) are left to the
        database defaults.

        Args:
            entity: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = cls(**cls.values_from_entity(entity))

        # Set ID if it exists (for updates)
        if entity.id:
            model.id = entity.id

        return model

    @classmethod
    def values_from_entity(cls, entity: Any) -> dict[str, Any]:
        """Mutable column values read from an entity."""
        return {name: getattr(entity, name) for name in cls.mutable_fields() if hasattr(entity, name)}

    def __repr__(self) -> str:
        """String representation including the primary key."""
        return f"{type(self).__name__}(id={getattr(self, 'id', None)!r})"

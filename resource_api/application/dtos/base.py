"""Base DTOs shared by every resource."""

from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from resource_api.application.exceptions import InvalidArgumentError


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


class EntityWriteDTO(BaseModel):
    """
    Request body for create (POST) and full replace (PUT).

    Subclasses declare the writable fields and point ``__entity__`` at the
    domain entity they build. Field names must match the entity's.
    """

    __entity__: ClassVar[type]

    def to_entity(self, id: Optional[int] = None) -> Any:
        """
        Build the domain entity.

        Args:
            id: Identity to assign; None for entities not yet created

        Returns:
            Domain entity (its own invariants are checked on construction)
        """
        return self.__entity__(id=id, **self.model_dump())

    @classmethod
    def validate_patch(cls, current: Any, fields_to_update: Mapping[str, Any]) -> dict[str, Any]:
        """
        Check a partial update against the same rules as a full write.

        The patch is merged over the writable fields of ``current`` and the
        result validated as a whole. Writable keys come back with their
        normalised values; keys this DTO does not declare are returned
        untouched for the repository to reject.

        Raises:
            InvalidArgumentError: If a patched value is malformed
        """
        writable = cls.model_fields.keys()
        merged = {name: getattr(current, name) for name in writable}
        merged.update((key, value) for key, value in fields_to_update.items() if key in writable)

        try:
            validated = cls.model_validate(merged).model_dump()
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise InvalidArgumentError(f"Invalid field value. {details}") from exc

        return {
            key: validated[key] if key in writable else value
            for key, value in fields_to_update.items()
        }


class EntityReadDTO(BaseModel):
    """DTO for returning entity data to presentation layer."""

    id: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, entity: Any) -> "EntityReadDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        Args:
            entity: Domain entity returned from a repository

        Returns:
            DTO instance

        Raises:
            ValueError: If the entity has not been persisted (missing id)
        """
        if entity.id is None:
            raise ValueError(
                f"Cannot create {cls.__name__} from non-persisted entity: missing id. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls.model_validate(entity)

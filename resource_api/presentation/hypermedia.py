"""Hypermedia (HATEOAS) envelopes and link generation."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from resource_api.domain.entities.page import Page

T = TypeVar("T")

# Resolves a route name plus path params to a URI, e.g. ``request.url_for``
UrlResolver = Callable[..., Any]


class PageDTO(BaseModel, Generic[T]):
    """Wire form of a Page: camelCase pagination metadata plus items."""

    items: list[T]
    current_page: int = Field(alias="currentPage")
    page_size: int = Field(alias="pageSize")
    total_count: int = Field(alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_page(cls, page: Page[Any], convert: Callable[[Any], T]) -> "PageDTO[T]":
        """
        Build the DTO from a domain page.

        Args:
            page: Domain page
            convert: Maps one entity to its DTO
        """
        return cls(
            items=[convert(item) for item in page.items],
            current_page=page.current_page,
            page_size=page.page_size,
            total_count=page.total_count,
        )


class Envelope(BaseModel, Generic[T]):
    """Response wrapper embedding navigable links alongside the payload."""

    data: T
    links: dict[str, str]


@dataclass(frozen=True)
class RouteNames:
    """Named route templates of one resource."""

    list: str
    get_by_id: str
    update: str
    delete: str

    @classmethod
    def for_resource(cls, resource: str) -> "RouteNames":
        return cls(
            list=f"{resource}:list",
            get_by_id=f"{resource}:get_by_id",
            update=f"{resource}:update",
            delete=f"{resource}:delete",
        )


class LinkBuilder:
    """
    Builds the ``links`` mapping of an envelope.

    A pure function of the route names, the URL resolver and the entity id
    (or its absence for a listing). It never queries storage and needs
    nothing from the entity but its id.
    """

    def __init__(self, routes: RouteNames, resolve: UrlResolver):
        self._routes = routes
        self._resolve = resolve

    def for_entity(self, entity_id: int) -> dict[str, str]:
        """``self``, ``update`` and ``delete`` links bound to ``entity_id``."""
        return {
            "self": self._url(self._routes.get_by_id, id=entity_id),
            "update": self._url(self._routes.update, id=entity_id),
            "delete": self._url(self._routes.delete, id=entity_id),
        }

    def for_collection(self) -> dict[str, str]:
        """Single ``self`` link to the list endpoint, without query parameters."""
        return {"self": self._url(self._routes.list)}

    def _url(self, name: str, **path_params: Any) -> str:
        return str(self._resolve(name, **path_params))


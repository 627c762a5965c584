"""Generic resource controller - maps HTTP verbs onto a ResourceService.

One ResourceController per resource builds an APIRouter with list, get,
create, replace, partial update and delete endpoints. Success results are
wrapped in hypermedia envelopes; failures are left to the global exception
handlers registered in main.py, which produce ``{errorCode, message}``.
"""

from collections.abc import Callable
from typing import Any, Generic, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from resource_api.application.dtos.base import EntityReadDTO, EntityWriteDTO
from resource_api.application.services.resource_service import ResourceService
from resource_api.domain.entities.base import FieldValue, TEntity
from resource_api.domain.entities.page import Page
from resource_api.presentation.error_schemas import ErrorResponse
from resource_api.presentation.hypermedia import Envelope, LinkBuilder, PageDTO, RouteNames

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid argument"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Operation failed"},
}
NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Entity not found"},
}


class ResourceController(Generic[TEntity]):
    """
    REST endpoints for one entity type.

    Usage:
        controller = ResourceController(
            resource="products",
            write_schema=ProductWriteDTO,
            read_schema=ProductDTO,
            get_service=get_product_service,
        )
        app.include_router(controller.router, prefix="/api")

    Routes are named ``<resource>:list``, ``<resource>:get_by_id``,
    ``<resource>:update`` and ``<resource>:delete``; hypermedia links are
    resolved from those names.
    """

    def __init__(
        self,
        *,
        resource: str,
        write_schema: type[EntityWriteDTO],
        read_schema: type[EntityReadDTO],
        get_service: Callable[..., ResourceService[TEntity]],
        tags: Optional[list[str]] = None,
    ):
        """
        Args:
            resource: Path segment and route name prefix, e.g. "products"
            write_schema: Request body for POST and PUT
            read_schema: Representation returned in ``data``
            get_service: FastAPI dependency returning the resource service
            tags: OpenAPI tags (defaults to ``[resource]``)
        """
        self.resource = resource
        self.routes = RouteNames.for_resource(resource)
        self.write_schema = write_schema
        self.read_schema = read_schema
        self.entity_envelope = Envelope[read_schema]
        self.page_envelope = Envelope[PageDTO[read_schema]]
        self.router = APIRouter(prefix=f"/{resource}", tags=tags or [resource])
        self._register_routes(get_service)

    def links(self, request: Request) -> LinkBuilder:
        return LinkBuilder(self.routes, request.url_for)

    def wrap_entity(self, request: Request, entity: TEntity) -> Envelope[Any]:
        """Envelope with self/update/delete links for one persisted entity."""
        return self.entity_envelope(
            data=self.read_schema.from_entity(entity),
            links=self.links(request).for_entity(entity.id),
        )

    def wrap_page(self, request: Request, page: Page[TEntity]) -> Envelope[Any]:
        """Envelope with a self link for one page of entities."""
        return self.page_envelope(
            data=PageDTO[self.read_schema].from_page(page, self.read_schema.from_entity),
            links=self.links(request).for_collection(),
        )

    def _register_routes(
        self, get_service: Callable[..., ResourceService[TEntity]]
    ) -> None:
        controller = self
        write_schema = self.write_schema
        name = self.resource

        @self.router.get(
            "",
            name=self.routes.list,
            response_model=self.page_envelope,
            responses=ERROR_RESPONSES,
            summary=f"List {name}",
            description=f"Retrieve one page of {name}.",
        )
        async def list_entities(
            request: Request,
            page: int = Query(1, description="1-based page number"),
            page_size: int = Query(10, alias="pageSize", description="Items per page"),
            service: ResourceService = Depends(get_service),
        ):
            result = await service.get_all(page, page_size)
            return controller.wrap_page(request, result)

        @self.router.get(
            "/{id}",
            name=self.routes.get_by_id,
            response_model=self.entity_envelope,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary=f"Get {name} item by ID",
        )
        async def get_entity(
            id: int,
            request: Request,
            service: ResourceService = Depends(get_service),
        ):
            entity = await service.get_by_id(id)
            return controller.wrap_entity(request, entity)

        @self.router.post(
            "",
            name=f"{name}:create",
            response_model=self.entity_envelope,
            status_code=status.HTTP_201_CREATED,
            responses=ERROR_RESPONSES,
            summary=f"Create {name} item",
        )
        async def create_entity(
            dto: write_schema,
            request: Request,
            response: Response,
            service: ResourceService = Depends(get_service),
        ):
            created = await service.add(dto.to_entity())
            envelope = controller.wrap_entity(request, created)
            response.headers["Location"] = envelope.links["self"]
            return envelope

        @self.router.put(
            "/{id}",
            name=self.routes.update,
            response_model=self.entity_envelope,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary=f"Replace {name} item",
            description="The path id is authoritative; any id in the body is ignored.",
        )
        async def update_entity(
            id: int,
            dto: write_schema,
            request: Request,
            service: ResourceService = Depends(get_service),
        ):
            updated = await service.update(dto.to_entity(id=id))
            return controller.wrap_entity(request, updated)

        @self.router.patch(
            "/{id}",
            name=f"{name}:update_fields",
            response_model=self.entity_envelope,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary=f"Partially update {name} item",
        )
        async def update_entity_fields(
            id: int,
            request: Request,
            fields_to_update: dict[str, FieldValue] = Body(..., examples=[{"price": 18.99}]),
            service: ResourceService = Depends(get_service),
        ):
            entity = await service.get_by_id(id)
            changes = write_schema.validate_patch(entity, fields_to_update)
            updated = await service.update_fields(entity, changes)
            return controller.wrap_entity(request, updated)

        @self.router.delete(
            "/{id}",
            name=self.routes.delete,
            status_code=status.HTTP_204_NO_CONTENT,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary=f"Delete {name} item",
        )
        async def delete_entity(
            id: int,
            service: ResourceService = Depends(get_service),
        ) -> None:
            await service.delete(id)

"""Category API endpoints."""

from resource_api.application.dtos.category_dto import CategoryDTO, CategoryWriteDTO
from resource_api.presentation.dependencies import get_category_service
from resource_api.presentation.resource_controller import ResourceController

controller = ResourceController(
    resource="categories",
    write_schema=CategoryWriteDTO,
    read_schema=CategoryDTO,
    get_service=get_category_service,
)

router = controller.router

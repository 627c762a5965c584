"""Product API endpoints."""

from resource_api.application.dtos.product_dto import ProductDTO, ProductWriteDTO
from resource_api.presentation.dependencies import get_product_service
from resource_api.presentation.resource_controller import ResourceController

controller = ResourceController(
    resource="products",
    write_schema=ProductWriteDTO,
    read_schema=ProductDTO,
    get_service=get_product_service,
)

router = controller.router

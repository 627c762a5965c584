"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from resource_api.application.exceptions import ApplicationError
from resource_api.domain.exceptions import DomainException
from resource_api.infrastructure.config.logging_config import configure_logging
from resource_api.infrastructure.config.settings import Settings, get_settings
from resource_api.infrastructure.persistence.database import create_all_tables
from resource_api.presentation.api import categories, products
from resource_api.presentation.dependencies import (
    dispose_database_engine,
    get_database_engine,
)
from resource_api.presentation.error_schemas import ValidationErrorResponse
from resource_api.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)


def create_app(settings: Settings) -> FastAPI:
    """Build the application: middleware, exception handlers and resource routers."""
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Build the engine from this app's settings; release connections on shutdown."""
        engine = get_database_engine(settings)
        if settings.db_create_all:
            await create_all_tables(engine)
        yield
        await dispose_database_engine()

    application = FastAPI(
        title=settings.app_name,
        description="Generic REST resource layer with paging and hypermedia links",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Configure CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    # Register exception handlers
    # - ApplicationError handles ALL service layer errors (not found, invalid argument, ...)
    # - DomainException handles entity invariant violations
    # - RequestValidationError handles Pydantic validation errors
    # - SQLAlchemyError handles database errors that escaped the repositories
    # - Exception handles everything else
    application.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
    application.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(Exception, generic_exception_handler)

    # Include routers
    application.include_router(products.router, prefix="/api")
    application.include_router(categories.router, prefix="/api")

    @application.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "message": settings.app_name,
            "status": "running",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    application.openapi = lambda: custom_openapi(application)  # type: ignore[method-assign]
    return application


def custom_openapi(application: FastAPI) -> dict:
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default HTTPValidationError schema with ValidationErrorResponse
    to match the actual error format returned by our validation_error_handler.
    """
    # Return cached schema if it exists
    if application.openapi_schema:
        return application.openapi_schema

    openapi_schema = get_openapi(
        title=application.title,
        version=application.version,
        description=application.description,
        routes=application.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})

    # Remove the default HTTPValidationError and the ValidationError it uses
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)

    # Add our custom validation error schema
    validation_schema = ValidationErrorResponse.model_json_schema(
        by_alias=True, ref_template="#/components/schemas/{model}"
    )
    schemas.update(validation_schema.pop("$defs", {}))
    schemas["ValidationErrorResponse"] = validation_schema

    # Update all 422 response references to use our custom schema
    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    # Cache the schema
    application.openapi_schema = openapi_schema
    return application.openapi_schema


app = create_app(get_settings())

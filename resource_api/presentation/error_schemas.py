"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Uniform error body returned for every failed request."""

    error_code: str = Field(
        ...,
        alias="errorCode",
        description="Machine-readable error code for client-side error handling",
        examples=["NOT_FOUND", "INVALID_ARGUMENT", "OPERATION_FAILED"],
    )
    message: str = Field(
        ...,
        description="Human-readable description. Generic for server errors.",
        examples=["Entity of type Product with ID 1 not found."],
    )

    model_config = ConfigDict(populate_by_name=True)


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error.

    Represents a single validation error with the field location and error message.
    """

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.name', 'query.page')",
        examples=["body.name", "body.price", "query.page"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "Field required",
            "Input should be greater than or equal to 0",
            "Input should be a valid integer",
        ],
    )


class ValidationErrorResponse(ErrorResponse):
    """Model for the complete 422 validation error response.

    This is the actual format returned by the validation_error_handler
    in resource_api/presentation/exception_handlers.py.
    """

    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "errorCode": "VALIDATION_ERROR",
                "message": "Validation failed",
                "errors": [
                    {
                        "field": "body.price",
                        "message": "Input should be greater than or equal to 0",
                    },
                    {
                        "field": "body.name",
                        "message": "Field required",
                    },
                ],
            }
        },
    )

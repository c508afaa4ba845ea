"""REST API error response models.

Documented shape of every error body produced by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used inside validation errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "year_min",
                "message": "Must be less than or equal to year_max",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"}

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "price", "message": "Must be >= 0", "code": "NEGATIVE"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "make", "message": "Must not be empty", "code": "REQUIRED"},
                    ],
                },
            ]
        }
    )

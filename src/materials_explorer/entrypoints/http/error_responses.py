"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "crystal_system",
                "message": "'hexagonall' is not a value of this catalog",
                "code": "UNKNOWN_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Material with identifier 'mp-0' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "endpoint",
                        "message": "Must be 'lower' or 'upper'",
                        "code": "INVALID_ENDPOINT"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Material with identifier 'mp-0' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "facet",
                            "message": "Unknown range facet 'hardness'",
                            "code": "UNKNOWN_FACET",
                        }
                    ],
                },
            ]
        }
    )

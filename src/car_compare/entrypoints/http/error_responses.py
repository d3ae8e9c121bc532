"""REST API error response models.

Structured error responses that give every HTTP error the same shape.
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
                "field": "only_differences",
                "message": "Input should be a valid boolean",
                "code": "bool_parsing",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Rejected transition:
            {
                "detail": "At least 2 cars must be selected to compare",
                "code": "CONFLICT"
            }

        Unknown car:
            {
                "detail": "Car with identifier '42' not found",
                "code": "NOT_FOUND"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "At least 2 cars must be selected to compare", "code": "CONFLICT"},
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
            ]
        }
    )

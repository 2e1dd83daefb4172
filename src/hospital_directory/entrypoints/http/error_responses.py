"""Pydantic models documenting the error envelope in OpenAPI.

Runtime bodies are built by exception_handlers; these models only describe
them for the generated docs and for routes' ``responses=`` maps.
"""

from pydantic import BaseModel, ConfigDict

_REQUIRED_DISCOUNT = {
    "field": "discount_percentage",
    "message": "Discount percentage is required when discount is available",
    "code": "REQUIRED",
}


class ErrorDetail(BaseModel):
    """One failing field; ``code`` is REQUIRED, TOO_LONG, INVALID_FORMAT, ..."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"field": "name", "message": "Test name is required", "code": "REQUIRED"}
        }
    )

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """``{"detail", "code", "errors"?}``; ``errors`` only for field-level validation."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Hospital with identifier 'abc' not found", "code": "NOT_FOUND"},
                {"detail": "This hospital already offers this test", "code": "CONFLICT"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [_REQUIRED_DISCOUNT],
                },
            ]
        }
    )

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None


def _documented(description: str) -> dict:
    return {"model": ErrorResponse, "description": description}


ERROR_RESPONSES = {
    400: _documented("Invalid parameters or payload"),
    404: _documented("Hospital, medical test or offering not found"),
}

CONFLICT_RESPONSE = {409: _documented("Uniqueness or reference conflict")}

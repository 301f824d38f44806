"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str


class FieldError(BaseModel):
    """One failed constraint on one field."""

    field: str
    constraint: str


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation failed"
    details: list[FieldError]


# OpenAPI documentation for the error bodies produced by api/errors.py
AUTH_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
}
OWNER_RESPONSES = {
    **AUTH_RESPONSES,
    400: {"model": ErrorResponse, "description": "Malformed user ID"},
    403: {"model": ErrorResponse, "description": "Path names another user"},
}
VALIDATION_RESPONSES = {
    422: {"model": ValidationErrorResponse, "description": "Field validation failed"},
}

"""API models package."""

from .errors import (
    ErrorResponse,
    FieldError,
    ValidationErrorResponse,
    AUTH_RESPONSES,
    OWNER_RESPONSES,
    VALIDATION_RESPONSES,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
    "AUTH_RESPONSES",
    "OWNER_RESPONSES",
    "VALIDATION_RESPONSES",
]

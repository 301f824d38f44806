"""
Base exception classes for the User/Order API.

Each module defines its own exceptions that inherit from these bases.
The API layer maps each base class to exactly one HTTP status code
(see api/errors.py), so modules never pick status codes themselves.
"""

from typing import Optional, Any


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {"error": self.message}


class BadRequestError(AppError):
    """Malformed identifiers, query parameters or request bodies."""

    def __init__(
        self,
        message: str = "Bad request",
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, code or "BAD_REQUEST", details)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.details:
            data["details"] = self.details
        return data


class ValidationError(AppError):
    """Field-level validation failed on a well-formed request body."""

    def __init__(
        self,
        details: list[dict[str, str]],
        message: str = "Validation failed",
    ):
        super().__init__(message, code="VALIDATION_FAILED", details=details)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class NotFoundError(AppError):
    """Resource not found."""

    pass


class ConflictError(AppError):
    """A uniqueness rule would be violated."""

    pass


class AuthenticationError(AppError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(AppError):
    """Authorization failed (caller does not own the resource)."""

    pass


class RepositoryError(AppError):
    """
    Error raised by the persistence layer.

    The message carries context for logs only; it is never sent to clients.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code="REPOSITORY_ERROR")
        self.cause = cause


class IntegrityConflictError(RepositoryError):
    """A write was rejected by a database constraint (e.g. a unique index)."""

    pass

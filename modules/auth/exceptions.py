"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers: authentication failures become 401, ownership failures 403.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidTokenError(AuthenticationError):
    """
    Raised when a JWT token is invalid, tampered with or malformed.

    The client always sees the generic message; ``reason`` is kept for logs.
    """

    def __init__(self, reason: str = "", message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN", details={"reason": reason} if reason else None)
        self.reason = reason


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token is expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Missing or invalid Authorization header"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class OwnershipError(AuthorizationError):
    """Raised when the authenticated user acts on another user's resources."""

    def __init__(
        self,
        subject_id: int,
        owner_id: int,
        message: str = "Access denied: you can only access your own resources",
    ):
        super().__init__(
            message,
            code="ACCESS_DENIED",
            details={"subject_id": subject_id, "owner_id": owner_id},
        )

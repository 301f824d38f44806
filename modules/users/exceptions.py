"""
Users module exceptions.
"""

from shared.exceptions import BadRequestError, ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailExistsError(ConflictError):
    """Raised when an email is already registered to another user."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_EXISTS",
            details={"email": email},
        )


class InvalidAgeRangeError(BadRequestError):
    """Raised when min_age is greater than max_age."""

    def __init__(self, min_age: int, max_age: int):
        super().__init__(
            "min_age must not be greater than max_age",
            code="INVALID_AGE_RANGE",
            details=[{"field": "min_age", "constraint": "lte_max_age"}],
        )
        self.min_age = min_age
        self.max_age = max_age

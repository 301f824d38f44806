"""
Orders module exceptions.
"""

from shared.exceptions import NotFoundError


class OrderUserNotFoundError(NotFoundError):
    """Raised when the owner of an order does not exist."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="ORDER_USER_NOT_FOUND",
            details={"user_id": user_id},
        )

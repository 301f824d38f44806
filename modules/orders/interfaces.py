"""
Orders module interfaces.

The API layer depends on IOrderService; the service depends on
IOrderRepository and on the users module's IUserRepository for the
owner existence check.
"""

from typing import Protocol, runtime_checkable

from .models import Order, CreateOrderRequest


@runtime_checkable
class IOrderRepository(Protocol):
    """Data access for orders."""

    def create(self, user_id: int, request: CreateOrderRequest) -> Order:
        """Insert an order with a generated ID and creation time."""
        ...

    def list_by_user(self, user_id: int) -> list[Order]:
        """All orders of a user, newest first."""
        ...


@runtime_checkable
class IOrderService(Protocol):
    """
    Interface for order operations.

    Callers are expected to have checked that the authenticated user owns
    ``user_id``; the service only checks that the user exists.
    """

    def create_order(self, user_id: int, request: CreateOrderRequest) -> Order:
        """
        Place an order for a user.

        Raises:
            OrderUserNotFoundError: If the user does not exist
        """
        ...

    def list_orders(self, user_id: int) -> list[Order]:
        """
        List a user's orders, newest first.

        Raises:
            OrderUserNotFoundError: If the user does not exist
        """
        ...

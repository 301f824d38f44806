"""
Orders module.

Placing and listing orders for an existing user.
"""

from .interfaces import IOrderService, IOrderRepository
from .models import Order, OrderResponse, CreateOrderRequest
from .exceptions import OrderUserNotFoundError

__all__ = [
    "IOrderService",
    "IOrderRepository",
    "Order",
    "OrderResponse",
    "CreateOrderRequest",
    "OrderUserNotFoundError",
]

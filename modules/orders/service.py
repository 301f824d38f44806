"""
Orders service implementation.

Orders can only be placed for existing users. The existence check happens
here, before the insert, rather than through a database constraint.
"""

import logging
from typing import Optional

from modules.users.interfaces import IUserRepository

from .interfaces import IOrderRepository, IOrderService
from .models import Order, CreateOrderRequest
from .exceptions import OrderUserNotFoundError


class OrderService(IOrderService):
    """Order service backed by order and user repositories."""

    def __init__(
        self,
        repository: IOrderRepository,
        users: IUserRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._users = users
        self._logger = logger or logging.getLogger(__name__)

    def create_order(self, user_id: int, request: CreateOrderRequest) -> Order:
        self._require_user(user_id)
        order = self._repository.create(user_id, request)
        self._logger.info(
            "Order created: id=%d, user_id=%d, product=%s",
            order.id, user_id, order.product,
        )
        return order

    def list_orders(self, user_id: int) -> list[Order]:
        self._require_user(user_id)
        orders = self._repository.list_by_user(user_id)
        self._logger.debug("Orders fetched for user_id=%d, count=%d", user_id, len(orders))
        return orders

    def _require_user(self, user_id: int) -> None:
        if self._users.get_by_id(user_id) is None:
            self._logger.warning("Order operation for non-existent user: %d", user_id)
            raise OrderUserNotFoundError(user_id)

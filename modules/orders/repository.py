"""
Order repository for database access.

Encapsulates all SQLAlchemy queries and row mapping for the orders table.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from shared.repository import BaseRepository
from .models import Order, CreateOrderRequest
from .tables import OrderRow


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderRepository(BaseRepository[Order]):
    """
    Repository for order data access.

    Note: This repository does NOT check that the owning user exists.
    The service layer is responsible for that.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        super().__init__(session_factory)
        self._clock = clock or _utcnow

    def create(self, user_id: int, request: CreateOrderRequest) -> Order:
        with self._session("create order") as session:
            row = OrderRow(
                user_id=user_id,
                product=request.product,
                quantity=request.quantity,
                price=request.price,
                created_at=self._clock(),
            )
            session.add(row)
            session.flush()
            return self._map_to_order(row)

    def list_by_user(self, user_id: int) -> list[Order]:
        with self._session("list orders") as session:
            rows = session.scalars(
                select(OrderRow)
                .where(OrderRow.user_id == user_id)
                .order_by(OrderRow.created_at.desc(), OrderRow.id.desc())
            ).all()
            return [self._map_to_order(r) for r in rows]

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_order(row: OrderRow) -> Order:
        order = Order.model_validate(row)
        # SQLite hands timestamps back without a zone; they are stored as UTC.
        if order.created_at.tzinfo is None:
            order = order.model_copy(
                update={"created_at": order.created_at.replace(tzinfo=timezone.utc)}
            )
        return order

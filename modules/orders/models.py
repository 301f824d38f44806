"""
Orders module data models.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from shared.models import MAX_DB_INT

# Prices are exact decimals internally and plain JSON numbers on the wire.
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class Order(BaseModel):
    """A placed order. Orders are immutable once created."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    product: str
    quantity: int
    price: Price
    created_at: datetime


class CreateOrderRequest(BaseModel):
    """Payload for POST /users/{id}/orders."""

    product: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., ge=1, le=MAX_DB_INT)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class OrderResponse(BaseModel):
    """Public view of an order."""

    id: int
    user_id: int
    product: str
    quantity: int
    price: Price
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(**order.model_dump())

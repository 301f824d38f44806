"""
Order API endpoints.

Mounted under /users/{user_id}/orders. Only the user named in the path may
place or list orders there; the token's subject is the sole source of
identity.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import RequireOwner
from api.models import OWNER_RESPONSES, VALIDATION_RESPONSES
from api.dependencies import get_order_service
from shared.models import AuthenticatedUser

from .interfaces import IOrderService
from .models import CreateOrderRequest, OrderResponse

router = APIRouter()


@router.post(
    "/{user_id}/orders",
    response_model=OrderResponse,
    status_code=201,
    responses={**OWNER_RESPONSES, **VALIDATION_RESPONSES},
)
def create_order(
    request: CreateOrderRequest,
    owner: AuthenticatedUser = RequireOwner,
    service: IOrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Place an order for the authenticated user.

    Returns 403 when the path names another user and 404 when the
    authenticated user no longer exists.
    """
    return OrderResponse.from_order(service.create_order(owner.id, request))


@router.get("/{user_id}/orders", response_model=list[OrderResponse], responses=OWNER_RESPONSES)
def list_orders(
    owner: AuthenticatedUser = RequireOwner,
    service: IOrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    """List the authenticated user's orders, newest first."""
    return [OrderResponse.from_order(o) for o in service.list_orders(owner.id)]

"""
Authentication endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import LoginRequest, TokenResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange email and password for a bearer token.

    Returns 401 for an unknown email or a wrong password.
    """
    return TokenResponse(token=service.login(request.email, request.password))

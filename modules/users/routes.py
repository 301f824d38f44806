"""
User API endpoints.

Registration is public; every other user endpoint requires a bearer token.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from api.middleware.auth import RequireAuth
from api.models import AUTH_RESPONSES, VALIDATION_RESPONSES
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser, MAX_DB_INT

from .interfaces import IUserService
from .models import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    CreateUserRequest,
    UpdateUserRequest,
    UserListQuery,
    UserListResponse,
    UserResponse,
)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201, responses=VALIDATION_RESPONSES)
def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Register a new user.

    Returns 400 if the email is already registered.
    """
    return UserResponse.from_user(service.create_user(request))


@router.get("", response_model=UserListResponse, responses=AUTH_RESPONSES)
def list_users(
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    min_age: Optional[int] = Query(
        default=None, ge=0, le=MAX_DB_INT, description="Minimum age (inclusive, 0 for none)",
    ),
    max_age: Optional[int] = Query(
        default=None, ge=0, le=MAX_DB_INT, description="Maximum age (inclusive, 0 for none)",
    ),
    user: AuthenticatedUser = RequireAuth,
    service: IUserService = Depends(get_user_service),
) -> UserListResponse:
    """
    List users, optionally filtered by an age range.

    ``total`` counts every matching user, not just the current page.
    """
    query = UserListQuery(
        page=page,
        limit=limit,
        min_age=min_age or None,
        max_age=max_age or None,
    )
    result = service.list_users(query)
    return UserListResponse(
        page=query.page,
        limit=query.limit,
        total=result.total,
        users=[UserResponse.from_user(u) for u in result.users],
    )


@router.get("/{user_id}", response_model=UserResponse, responses=AUTH_RESPONSES)
def get_user(
    user_id: int = Path(..., gt=0, le=MAX_DB_INT),
    user: AuthenticatedUser = RequireAuth,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Get a user by ID."""
    return UserResponse.from_user(service.get_user(user_id))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**AUTH_RESPONSES, **VALIDATION_RESPONSES},
)
def update_user(
    request: UpdateUserRequest,
    user_id: int = Path(..., gt=0, le=MAX_DB_INT),
    user: AuthenticatedUser = RequireAuth,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Replace a user's name, email and age.

    Returns 400 if the new email belongs to another user.
    """
    return UserResponse.from_user(service.update_user(user_id, request))


@router.delete("/{user_id}", status_code=204, responses=AUTH_RESPONSES)
def delete_user(
    user_id: int = Path(..., gt=0, le=MAX_DB_INT),
    user: AuthenticatedUser = RequireAuth,
    service: IUserService = Depends(get_user_service),
) -> None:
    """
    Delete a user.

    Tokens already issued to the user stay valid until they expire.
    """
    service.delete_user(user_id)

"""
Users module.

Registration, profile reads/updates, deletion and paginated listing.

Public API:
- IUserService, IUserRepository: Interfaces for user operations
- User, UserResponse, request models
- User exceptions: UserNotFoundError, EmailExistsError
"""

from .interfaces import IUserService, IUserRepository
from .models import (
    User,
    UserPage,
    UserListQuery,
    UserResponse,
    UserListResponse,
    CreateUserRequest,
    UpdateUserRequest,
)
from .exceptions import UserNotFoundError, EmailExistsError, InvalidAgeRangeError

__all__ = [
    "IUserService",
    "IUserRepository",
    "User",
    "UserPage",
    "UserListQuery",
    "UserResponse",
    "UserListResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserNotFoundError",
    "EmailExistsError",
    "InvalidAgeRangeError",
]

"""
Authentication module.

Handles password hashing, token issuance/verification and login.

Public API:
- IAuthService, ITokenService: Interfaces for auth operations
- TokenService: JWT implementation of ITokenService
- hash_password / verify_password: Credential hashing
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ITokenService
from .models import TokenClaims, LoginRequest, TokenResponse
from .passwords import hash_password, verify_password
from .tokens import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    OwnershipError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenService",
    # Implementations
    "TokenService",
    "hash_password",
    "verify_password",
    # Models
    "TokenClaims",
    "LoginRequest",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "OwnershipError",
]

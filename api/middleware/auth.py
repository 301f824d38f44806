"""
JWT Authentication middleware.

Validates bearer tokens and exposes the caller's identity to route handlers.

Per request the flow is:
    no header / other scheme  -> 401, token service not called
    token present -> verify   -> 401 (expired | invalid) or accepted
    accepted                  -> AuthenticatedUser(id=subject)
"""

import logging
from typing import Optional

from fastapi import Depends, Path, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.interfaces import ITokenService
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    OwnershipError,
)
from shared.models import AuthenticatedUser, MAX_DB_INT

from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor. Errors are raised by get_current_user so that
# every rejection goes through the same 401 handler.
bearer_scheme = HTTPBearer(auto_error=False)

BEARER_SCHEME = "Bearer"


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None or credentials.scheme != BEARER_SCHEME or not credentials.credentials:
        logger.warning("Rejected %s %s: missing or malformed Authorization header",
                       request.method, request.url.path)
        raise MissingTokenError()

    try:
        claims = tokens.verify(credentials.credentials)
    except ExpiredTokenError:
        logger.warning("Rejected %s %s: token expired", request.method, request.url.path)
        raise
    except InvalidTokenError as e:
        logger.warning("Rejected %s %s: invalid token (%s)",
                       request.method, request.url.path, e.reason or "unknown")
        raise

    request.state.user_id = claims.subject
    logger.info("Authenticated user_id=%d for %s %s",
                claims.subject, request.method, request.url.path)
    return AuthenticatedUser(id=claims.subject)


def require_owner(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    user_id: int = Path(..., gt=0, le=MAX_DB_INT, description="ID of the user owning the resource"),
) -> AuthenticatedUser:
    """
    Dependency that requires the caller to be the user in the path.

    Resolution order gives: 401 (no/invalid token), then 400 (malformed
    path ID), then 403 (someone else's ID). The route body is validated
    only after this dependency succeeds.
    """
    if user.id != user_id:
        logger.warning("Access denied: user %d tried %s %s",
                       user.id, request.method, request.url.path)
        raise OwnershipError(
            subject_id=user.id,
            owner_id=user_id,
            message="Access denied: you can only access your own orders",
        )
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireOwner = Depends(require_owner)

"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, Field, EmailStr

from shared.models import MAX_DB_INT


class TokenClaims(BaseModel):
    """Verified claims of a bearer token."""

    subject: int = Field(..., gt=0, le=MAX_DB_INT, description="User ID the token was issued for")
    expires_at: datetime = Field(..., description="Expiry time (UTC)")

    model_config = {"frozen": True}


class LoginRequest(BaseModel):
    """Credentials submitted to POST /auth/login."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")


class TokenResponse(BaseModel):
    """Successful login response."""

    token: str = Field(..., description="Signed bearer token")

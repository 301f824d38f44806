"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

from pydantic import BaseModel, Field

# Largest value an INTEGER column (ids, ages) can hold
MAX_DB_INT = 2**31 - 1


class AuthenticatedUser(BaseModel):
    """
    Identity of the caller for the current request.

    Populated from verified token claims by the auth middleware and made
    available to route handlers via dependency injection. It is the only
    source of identity for authorization decisions.
    """

    id: int = Field(..., gt=0, le=MAX_DB_INT, description="Subject user ID from the token")

    model_config = {"frozen": True}

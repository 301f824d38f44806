"""
Authentication module interfaces.

Other modules and the API layer depend on these protocols, not on the
concrete implementations. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies bearer tokens."""

    def issue(self, subject_id: int) -> str:
        """
        Sign a new token for a user.

        Args:
            subject_id: ID of the user the token identifies

        Returns:
            Encoded token string
        """
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for credential-based login.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    def login(self, email: str, password: str) -> str:
        """
        Exchange an email/password pair for a bearer token.

        Args:
            email: Account email
            password: Plain-text password

        Returns:
            Signed bearer token for the matching user

        Raises:
            InvalidCredentialsError: If no user has this email or the
                password does not match
        """
        ...

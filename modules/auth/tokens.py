"""
Bearer token issuance and verification.

Tokens are HS256-signed JWTs carrying the user ID as the ``sub`` claim.
They are stateless: nothing is stored server-side, so a token stays valid
until it expires even if its user is deleted in the meantime.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from shared.models import MAX_DB_INT

from .exceptions import InvalidTokenError, ExpiredTokenError
from .models import TokenClaims

DEFAULT_TOKEN_TTL = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-limited bearer tokens.

    Args:
        secret: Symmetric signing key
        ttl: Lifetime of issued tokens
        algorithm: JWS algorithm used for signing and accepted on verify
        clock: Returns the current UTC time; used when issuing
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock or _utcnow

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject_id: int) -> str:
        """
        Sign a token for ``subject_id`` that expires after the configured TTL.

        Raises:
            ValueError: If subject_id is not a valid user ID
        """
        if subject_id <= 0 or subject_id > MAX_DB_INT:
            raise ValueError(f"Invalid token subject: {subject_id}")

        now = self._clock()
        payload = {
            "sub": str(subject_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Validate signature and expiry and return the token claims.

        Raises:
            ExpiredTokenError: If the token's expiry has passed
            InvalidTokenError: If the signature, structure or subject is bad
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError as e:
            raise InvalidTokenError(str(e))

        subject = payload.get("sub")
        if (
            not isinstance(subject, str)
            or not subject.isdecimal()
            or len(subject) > len(str(MAX_DB_INT))
            or not 0 < int(subject) <= MAX_DB_INT
        ):
            raise InvalidTokenError("subject missing")

        expires_at = payload.get("exp")
        if not isinstance(expires_at, (int, float)):
            raise InvalidTokenError("expiry missing")

        return TokenClaims(
            subject=int(subject),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )

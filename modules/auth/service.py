"""
Authentication service implementation.

Checks email/password credentials against the users table and issues
bearer tokens for successful logins.
"""

import logging
from typing import Optional

from modules.users.interfaces import IUserRepository

from .interfaces import IAuthService, ITokenService
from .exceptions import InvalidCredentialsError
from .passwords import verify_password


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Unknown emails and wrong passwords produce the same error so that the
    response does not reveal which emails are registered.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: ITokenService,
        logger: Optional[logging.Logger] = None,
    ):
        self._users = users
        self._tokens = tokens
        self._logger = logger or logging.getLogger(__name__)

    def login(self, email: str, password: str) -> str:
        user = self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self._logger.warning("Invalid credentials for email: %s", email)
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        self._logger.info("User logged in: id=%d", user.id)
        return token

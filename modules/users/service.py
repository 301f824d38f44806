"""
Users service implementation.

Business rules for registration and profile management: email uniqueness,
existence checks and password hashing. Persistence goes through
IUserRepository.
"""

import logging
from typing import Optional

from shared.exceptions import IntegrityConflictError
from modules.auth.passwords import hash_password

from .interfaces import IUserRepository, IUserService
from .models import (
    User,
    UserPage,
    UserListQuery,
    CreateUserRequest,
    UpdateUserRequest,
)
from .exceptions import UserNotFoundError, EmailExistsError, InvalidAgeRangeError


class UserService(IUserService):
    """User service backed by a user repository."""

    def __init__(
        self,
        repository: IUserRepository,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def create_user(self, request: CreateUserRequest) -> User:
        """Check email uniqueness, hash the password and insert the user."""
        if self._repository.get_by_email(request.email) is not None:
            self._logger.warning("Attempt to create user with existing email: %s", request.email)
            raise EmailExistsError(request.email)

        password_hash = hash_password(request.password)
        try:
            user = self._repository.create(
                name=request.name,
                email=request.email,
                age=request.age,
                password_hash=password_hash,
            )
        except IntegrityConflictError:
            # Lost a race with a concurrent registration of the same email.
            self._logger.warning("Unique constraint rejected email: %s", request.email)
            raise EmailExistsError(request.email)

        self._logger.info("User created: id=%d, email=%s", user.id, user.email)
        return user

    def get_user(self, user_id: int) -> User:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        """Load the user, re-check email uniqueness if it changed, then persist."""
        current = self.get_user(user_id)

        if request.email != current.email:
            owner = self._repository.get_by_email(request.email)
            if owner is not None and owner.id != user_id:
                self._logger.warning(
                    "User %d tried to take email %s owned by user %d",
                    user_id, request.email, owner.id,
                )
                raise EmailExistsError(request.email)

        try:
            updated = self._repository.update(
                user_id,
                name=request.name,
                email=request.email,
                age=request.age,
            )
        except IntegrityConflictError:
            raise EmailExistsError(request.email)

        if updated is None:
            # Deleted between the load and the write.
            raise UserNotFoundError(user_id)

        self._logger.info("User updated: id=%d", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        self.get_user(user_id)
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)
        self._logger.info("User deleted: id=%d", user_id)

    def list_users(self, query: UserListQuery) -> UserPage:
        if (
            query.min_age is not None
            and query.max_age is not None
            and query.min_age > query.max_age
        ):
            raise InvalidAgeRangeError(query.min_age, query.max_age)

        page = self._repository.list_users(
            offset=query.offset,
            limit=query.limit,
            min_age=query.min_age,
            max_age=query.max_age,
        )
        self._logger.debug(
            "Fetched users: page=%d, limit=%d, total=%d",
            query.page, query.limit, page.total,
        )
        return page

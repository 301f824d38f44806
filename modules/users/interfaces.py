"""
Users module interfaces.

The API layer depends on IUserService; services depend on IUserRepository.
The auth and orders modules reuse IUserRepository for lookups.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    User,
    UserPage,
    UserListQuery,
    CreateUserRequest,
    UpdateUserRequest,
)


@runtime_checkable
class IUserRepository(Protocol):
    """
    Data access for users.

    Lookups return None when nothing matches. Database failures raise
    RepositoryError; constraint violations raise IntegrityConflictError.
    """

    def create(self, name: str, email: str, age: int, password_hash: str) -> User:
        """Insert a user and return it with its generated ID."""
        ...

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact email, or None."""
        ...

    def update(self, user_id: int, name: str, email: str, age: int) -> Optional[User]:
        """Overwrite the mutable fields. Returns None if the user is gone."""
        ...

    def delete(self, user_id: int) -> bool:
        """Delete a user. Returns False if no row was affected."""
        ...

    def list_users(
        self,
        offset: int,
        limit: int,
        min_age: Optional[int] = None,
        max_age: Optional[int] = None,
    ) -> UserPage:
        """
        List users ordered by ID.

        Args:
            offset: Rows to skip
            limit: Maximum rows to return
            min_age: Inclusive lower age bound, if any
            max_age: Inclusive upper age bound, if any

        Returns:
            The requested slice and the total count of matching users
        """
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    This protocol defines the contract that the users module exposes
    to the API layer.
    """

    def create_user(self, request: CreateUserRequest) -> User:
        """
        Register a new user.

        Raises:
            EmailExistsError: If the email is already registered
        """
        ...

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        """
        Replace a user's name, email and age.

        Raises:
            UserNotFoundError: If the user does not exist
            EmailExistsError: If the new email belongs to another user
        """
        ...

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    def list_users(self, query: UserListQuery) -> UserPage:
        """
        List users with optional age filtering and pagination.

        Raises:
            InvalidAgeRangeError: If min_age is greater than max_age
        """
        ...

"""
User repository for database access.

Encapsulates all SQLAlchemy queries and row mapping for the users table.
"""

from typing import Optional

from sqlalchemy import delete, func, select

from shared.repository import BaseRepository
from .models import User, UserPage
from .tables import UserRow


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT enforce business rules such as email
    uniqueness. The service layer checks them before writing.
    """

    def create(self, name: str, email: str, age: int, password_hash: str) -> User:
        with self._session("create user") as session:
            row = UserRow(name=name, email=email, age=age, password_hash=password_hash)
            session.add(row)
            session.flush()
            return self._map_to_user(row)

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._session("get user by id") as session:
            row = session.get(UserRow, user_id)
            return self._map_to_user(row) if row is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        with self._session("get user by email") as session:
            row = session.scalars(select(UserRow).where(UserRow.email == email)).first()
            return self._map_to_user(row) if row is not None else None

    def update(self, user_id: int, name: str, email: str, age: int) -> Optional[User]:
        with self._session("update user") as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            row.name = name
            row.email = email
            row.age = age
            session.flush()
            return self._map_to_user(row)

    def delete(self, user_id: int) -> bool:
        with self._session("delete user") as session:
            result = session.execute(delete(UserRow).where(UserRow.id == user_id))
            return result.rowcount > 0

    def list_users(
        self,
        offset: int,
        limit: int,
        min_age: Optional[int] = None,
        max_age: Optional[int] = None,
    ) -> UserPage:
        conditions = []
        if min_age is not None:
            conditions.append(UserRow.age >= min_age)
        if max_age is not None:
            conditions.append(UserRow.age <= max_age)

        with self._session("list users") as session:
            total = session.scalar(
                select(func.count()).select_from(UserRow).where(*conditions)
            )
            rows = session.scalars(
                select(UserRow)
                .where(*conditions)
                .order_by(UserRow.id)
                .offset(offset)
                .limit(limit)
            ).all()
            return UserPage(users=[self._map_to_user(r) for r in rows], total=total or 0)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_user(row: UserRow) -> User:
        return User.model_validate(row)

"""
Users module data models.

Request models carry the field-level validation rules; the API layer turns
their failures into 422 responses with one entry per offending field.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import MAX_DB_INT

MAX_PAGE_SIZE = 100
# Keeps (page - 1) * limit within a 32-bit OFFSET
MAX_PAGE = MAX_DB_INT // MAX_PAGE_SIZE


class User(BaseModel):
    """A registered user, including the stored password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int
    password_hash: str = Field(..., repr=False)


class CreateUserRequest(BaseModel):
    """Registration payload for POST /users."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    age: int = Field(..., ge=1, le=MAX_DB_INT)
    password: str = Field(..., min_length=8, max_length=128)


class UpdateUserRequest(BaseModel):
    """Replacement of the mutable user fields for PUT /users/{id}."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    age: int = Field(..., ge=1, le=MAX_DB_INT)


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: int
    name: str
    email: str
    age: int

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email, age=user.age)


class UserListQuery(BaseModel):
    """Pagination and age filter for GET /users."""

    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)
    min_age: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)
    max_age: Optional[int] = Field(default=None, ge=1, le=MAX_DB_INT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class UserPage(BaseModel):
    """One page of users plus the total number of matches."""

    users: list[User]
    total: int


class UserListResponse(BaseModel):
    """Paginated list of users."""

    page: int
    limit: int
    total: int
    users: list[UserResponse]

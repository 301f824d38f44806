"""
Shared infrastructure for the User/Order API.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: SQLAlchemy engine, session factory and declarative base
- exceptions: Base exception classes
- logging_config: Log destination and format

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Base, create_db_engine, create_session_factory, init_db
from .exceptions import (
    AppError,
    BadRequestError,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    RepositoryError,
    IntegrityConflictError,
)
from .models import AuthenticatedUser, MAX_DB_INT

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "AppError",
    "BadRequestError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "RepositoryError",
    "IntegrityConflictError",
    "AuthenticatedUser",
    "MAX_DB_INT",
]

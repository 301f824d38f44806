"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from the settings:
engine -> session factory -> repositories -> services.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, ITokenService
    from modules.users.interfaces import IUserService, IUserRepository
    from modules.orders.interfaces import IOrderService, IOrderRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Everything is created lazily on first access and cached
    within the container. Use reset() to drop cached instances.

    Args:
        settings: Settings to build from (defaults to get_settings())
        engine: Pre-built engine, e.g. an in-memory SQLite engine in tests
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[Engine] = None,
    ) -> None:
        self._settings = settings
        self._engine = engine
        self._session_factory: "sessionmaker[Session] | None" = None
        self._token_service: "ITokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._order_repository: "IOrderRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._order_service: "IOrderService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine (owns the connection pool)."""
        if self._engine is None:
            from shared.database import create_db_engine
            self._engine = create_db_engine(
                self.settings.sqlalchemy_url,
                echo=self.settings.db_echo,
            )
        return self._engine

    @property
    def session_factory(self) -> "sessionmaker[Session]":
        if self._session_factory is None:
            from shared.database import create_session_factory
            self._session_factory = create_session_factory(self.engine)
        return self._session_factory

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                ttl=self.settings.jwt_expiration,
                algorithm=self.settings.jwt_algorithm,
            )
        return self._token_service

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.session_factory)
        return self._user_repository

    @property
    def order_repository(self) -> "IOrderRepository":
        """Get the order repository instance."""
        if self._order_repository is None:
            from modules.orders.repository import OrderRepository
            self._order_repository = OrderRepository(self.session_factory)
        return self._order_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(repository=self.user_repository)
        return self._user_service

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.service import OrderService
            self._order_service = OrderService(
                repository=self.order_repository,
                users=self.user_repository,
            )
        return self._order_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The engine and settings are kept, so the database stays the same.
        """
        self._session_factory = None
        self._token_service = None
        self._user_repository = None
        self._order_repository = None
        self._auth_service = None
        self._user_service = None
        self._order_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a specific container, e.g. one bound to a test database."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_order_service() -> "IOrderService":
    """FastAPI dependency for order service."""
    return get_container().orders

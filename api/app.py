"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import DEFAULT_JWT_SECRET, Settings
from shared.database import init_db
from shared.logging_config import configure_logging
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.orders.routes import router as orders_router

from .dependencies import ServiceContainer, get_container, set_container
from .errors import register_exception_handlers
from .middleware.request_logging import RequestLoggingMiddleware
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates missing tables on startup and releases the connection pool
    on shutdown.
    """
    container = get_container()
    settings = container.settings
    logger.info("Starting %s on %s:%d", settings.app_name, settings.host, settings.port)
    if settings.auto_create_tables:
        init_db(container.engine)
    yield
    logger.info("Shutting down %s", settings.app_name)
    container.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use. When given, a new service container is
            installed for them; otherwise the current container's settings
            are used.

    Returns:
        Configured FastAPI instance
    """
    if settings is None:
        settings = get_container().settings
    else:
        set_container(ServiceContainer(settings=settings))
    configure_logging(settings.log_level, settings.log_file)

    if settings.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; using the built-in default secret")

    app = FastAPI(
        title=settings.app_name,
        description="User and order management API with token authentication",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(orders_router, prefix="/users", tags=["orders"])

    return app


# Application instance for uvicorn
app = create_app()

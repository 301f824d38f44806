"""
User/Order API package.

Provides the FastAPI application for the user and order service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

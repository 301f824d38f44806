"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Route tests run against a real app wired to an in-memory SQLite database.
"""

import pytest
from datetime import datetime, timezone, timedelta
from jose import jwt
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, set_container, reset_container
from shared.config import Settings
from shared.database import create_db_engine, create_session_factory, init_db


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_DATABASE_URL = "sqlite://"


def create_test_token(
    user_id: int = 1,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to put in the ``sub`` claim
        expired: If True, creates an expired token
        secret: Signing key (pass another value to forge a bad signature)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": str(user_id),
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_header(user_id: int) -> dict[str, str]:
    """Authorization header carrying a valid token for ``user_id``."""
    return {"Authorization": f"Bearer {create_test_token(user_id)}"}


@pytest.fixture
def test_settings() -> Settings:
    """Settings bound to an in-memory database and the test secret."""
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        jwt_secret=TEST_JWT_SECRET,
        auto_create_tables=False,
    )


@pytest.fixture
def engine(test_settings):
    """In-memory SQLite engine with the schema created."""
    engine = create_db_engine(test_settings.sqlalchemy_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def container(test_settings, engine):
    """Install a service container bound to the test database."""
    container = ServiceContainer(settings=test_settings, engine=engine)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def client(container) -> TestClient:
    """Test client for a fresh app using the test container."""
    return TestClient(create_app())


@pytest.fixture
def register_user(client):
    """Register a user through the API and return the response body."""

    def _register(
        name: str = "Ann",
        email: str = "ann@example.com",
        age: int = 30,
        password: str = "secret123",
    ) -> dict:
        response = client.post(
            "/users",
            json={"name": name, "email": email, "age": age, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register

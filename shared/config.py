"""
Centralized configuration for the User/Order API.

All settings are loaded from environment variables (or a .env file) with
sensible defaults. Database settings are namespaced DB_*, token settings JWT_*.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "User Order API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8080, validation_alias=AliasChoices("server_port", "port"))
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Database
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "userorderapi"
    db_sslmode: str = "disable"
    db_echo: bool = False
    auto_create_tables: bool = True

    # Tokens
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiration: timedelta = timedelta(hours=24)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def sqlalchemy_url(self) -> str:
        """Full SQLAlchemy URL, either given directly or assembled from DB_* values."""
        if self.database_url:
            return self.database_url
        credentials = quote_plus(self.db_user)
        if self.db_password:
            credentials += ":" + quote_plus(self.db_password)
        return (
            f"postgresql+psycopg://{credentials}@{self.db_host}:{self.db_port}"
            f"/{self.db_name}?sslmode={self.db_sslmode}"
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

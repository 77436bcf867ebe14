"""
Centralized configuration for the user directory backend.

All settings are loaded from environment variables with sensible defaults.
Every variable is prefixed with DIRECTORY_ (e.g., DIRECTORY_JWT_SECRET).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DIRECTORY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "User Directory API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8091
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Tokens (immutable after startup)
    jwt_secret: str = "secretKey"
    jwt_algorithm: str = "HS256"
    token_lifetime_seconds: int = 3600

    # Credentials
    bcrypt_rounds: int = 10

    # Seed data loaded at startup (JSON array of users)
    seed_file: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()

"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "Street Permit"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    database_url: str = "sqlite+aiosqlite:///./street_permit.db"

    redis_url: str = "redis://localhost:6379/0"

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Permit QR signing
    permit_token_secret: str = "change-this-in-production"
    permit_token_algorithm: str = "HS256"

    # Submission locking
    submission_lock_backend: Literal["local", "redis"] = "local"
    submission_lock_timeout_seconds: float = 10.0
    submission_lock_wait_seconds: float = 5.0

    # Conflict detection
    check_standalone_conflicts: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()

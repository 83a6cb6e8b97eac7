"""Calculator settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings loaded from environment variables / .env file.

    Zone boundaries are fixed in ``src.engine.zones`` and are not settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    # --- Calculator defaults ---
    DEFAULT_TRAVEL_INFLATION_PCT: float = Field(
        default=4.0,
        description="Annual travel inflation applied when a form leaves it unset.",
    )
    VESTING_TOLERANCE_PCT: float = Field(
        default=0.01,
        gt=0,
        description="Allowed distance from 100% for a vesting schedule to count as complete.",
    )


def get_settings() -> Settings:
    """Factory function for settings."""
    return Settings()

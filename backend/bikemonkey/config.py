"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every field can be overridden with a BIKEMONKEY_* environment variable
or a .env file in the working directory.
"""

import logging

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Log rejected records")
    log_level: str = Field(default="WARNING", description="Logging level")

    # === Input ===
    results_file: str = Field(
        default="lgfresults.json",
        description="Results document read when no source is given"
    )
    http_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds when the source is a URL"
    )

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Normalise to an upper-case standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    model_config = ConfigDict(
        env_prefix="BIKEMONKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()

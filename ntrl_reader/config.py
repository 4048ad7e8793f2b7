# ntrl_reader/config.py
"""
Centralized configuration with validation.

Uses pydantic-settings to load and validate environment variables.
Policy thresholds are fixed in ntrl_reader.constants; only operational
values (timeouts, cache sizing, logging) are configurable here.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ntrl_reader.constants import ReaderLimits


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Reader mode
    READER_FETCH_TIMEOUT_SECONDS: float = Field(
        default=ReaderLimits.FETCH_TIMEOUT_SECONDS,
        description="Overall deadline for fetching an article page",
    )
    READER_CACHE_TTL_SECONDS: int = Field(
        default=ReaderLimits.CACHE_TTL_SECONDS,
        description="How long an extracted article is served from memory",
    )
    READER_CACHE_MAX_ENTRIES: int = Field(
        default=200,
        description="Maximum number of articles kept in the reader cache",
    )
    READER_USER_AGENT: str = Field(
        default=ReaderLimits.USER_AGENT,
        description="User-Agent header sent when fetching article pages",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Emit single-line JSON logs instead of human-readable lines",
    )

    @field_validator("READER_FETCH_TIMEOUT_SECONDS", "READER_CACHE_TTL_SECONDS", "READER_CACHE_MAX_ENTRIES")
    @classmethod
    def must_be_positive(cls, v):
        """Timeouts and cache sizing must be positive."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Client configuration loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    meilisearch_url: str = "http://localhost:7700"
    meilisearch_api_key: str | None = None
    log_level: str = "INFO"
    max_retry_attempts: int = 2
    request_timeout: float = 30.0

    @field_validator("meilisearch_url")
    @classmethod
    def validate_meilisearch_url(cls, value: str) -> str:
        """URL must be absolute http(s); a trailing slash is dropped."""
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            msg = "meilisearch_url must be an http or https URL"
            raise ValueError(msg)
        return value.rstrip("/")

    @field_validator("meilisearch_api_key")
    @classmethod
    def validate_meilisearch_api_key(cls, value: str | None) -> str | None:
        """A blank API key is treated as no key."""
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("max_retry_attempts")
    @classmethod
    def validate_max_retry_attempts(cls, value: int) -> int:
        """Max retry attempts must be between 0 and 5."""
        if value < 0 or value > 5:
            msg = "max_retry_attempts must be between 0 and 5"
            raise ValueError(msg)
        return value

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, value: float) -> float:
        """Request timeout must be positive."""
        if value <= 0:
            msg = "request_timeout must be greater than 0"
            raise ValueError(msg)
        return value

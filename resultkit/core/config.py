"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. Every
field has a default, so resultkit works without any environment set up.

Architecture:
- Flat Settings structure (no nesting)
- Environment variables prefixed with RESULTKIT_
- Type validation via Pydantic

Usage:
    from resultkit.core.config import get_settings

    settings = get_settings()
    if settings.log_json:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resultkit.core.enums import Environment


class Settings(BaseSettings):
    """
    resultkit settings (flat structure).

    Configuration precedence:
        1. Environment variables (RESULTKIT_*)
        2. Default values

    Message fields default to None, meaning "use the built-in wording"
    (see resultkit.core.messages).
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of the colored console format",
    )

    # Default Result messages
    success_message: str | None = Field(
        default=None,
        description="Message for Success values built without an explicit message",
    )
    error_message_template: str | None = Field(
        default=None,
        description="Template for generic failure messages; must contain {detail}",
    )

    # Event sink
    event_bus_type: str = Field(
        default="in-memory",
        description="Event bus adapter for the event observer (in-memory)",
    )

    # Async boundary
    async_max_workers: int | None = Field(
        default=None,
        description="Worker threads for run_async's executor (None = loop default)",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name, any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("error_message_template")
    @classmethod
    def validate_error_message_template(cls, v: str | None) -> str | None:
        """
        Ensure the template has a {detail} placeholder.

        Args:
            v: Template string or None.

        Returns:
            str | None: The unchanged template.

        Raises:
            ValueError: If the template lacks {detail}.
        """
        if v is not None and "{detail}" not in v:
            raise ValueError("error_message_template must contain '{detail}'")
        return v

    @field_validator("async_max_workers")
    @classmethod
    def validate_async_max_workers(cls, v: int | None) -> int | None:
        """
        Ensure a configured worker count is positive.

        Args:
            v: Worker count or None.

        Returns:
            int | None: The unchanged worker count.

        Raises:
            ValueError: If v is less than 1.
        """
        if v is not None and v < 1:
            raise ValueError("async_max_workers must be at least 1")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process. Tests that
    patch the environment call get_settings.cache_clear() first.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()

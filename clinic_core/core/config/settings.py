"""
Application settings module.

This module provides the configuration of the domain core: environment,
logging level, display locale and the time zone used to decide what "today"
means for date-only business rules.
"""

# Standard Library Imports
import logging
import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Third-Party Imports
from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

from clinic_core.core.constants.logging import LogLevel

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # Project Information
    PROJECT_NAME: str = "Clinic Core"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: str = "development"  # development, staging, production, test
    TESTING: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Display locale used by Money.format when none is given
    DEFAULT_LOCALE: str = "pt-BR"

    # IANA zone for local dates; system local time when unset
    LOCAL_TIMEZONE: str | None = None

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = [level.value for level in LogLevel]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("LOCAL_TIMEZONE")
    def validate_local_timezone(cls, v: str | None) -> str | None:
        """Validate that the local time zone is a known IANA name."""
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @property
    def local_zone(self) -> ZoneInfo | None:
        """Return the configured local zone, if any."""
        return ZoneInfo(self.LOCAL_TIMEZONE) if self.LOCAL_TIMEZONE else None


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the application settings.

    The instance is cached; call ``get_settings.cache_clear()`` after changing
    the environment to pick up new values.

    Returns:
        The application settings instance
    """
    settings = Settings()
    if os.environ.get("PYTEST_CURRENT_TEST"):
        settings.TESTING = True
        settings.ENVIRONMENT = "test"
        logger.debug("Running in TEST environment")
    return settings

"""
composio-cli Settings - Environment-backed configuration.

Command-line flags always take precedence; these settings only supply the
fallbacks read from the environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComposioSettings(BaseSettings):
    """Composio client settings.

    Environment variables:
        COMPOSIO_API_KEY: API key used when --api-key is not given.
    """

    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("COMPOSIO_API_KEY"),
        description="Composio API key",
    )

    model_config = SettingsConfigDict(extra="ignore")


class LoggingSettings(BaseSettings):
    """Logging Settings.

    Environment variables:
        COMPOSIO_CLI_LOGGING_LEVEL: Console level when --verbose is off. Default: WARNING
        COMPOSIO_CLI_LOGGING_DIR: Directory for rotating log files. Default: unset (no file)
    """

    level: str = Field(default="WARNING")
    dir: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(env_prefix="COMPOSIO_CLI_LOGGING_")

    @field_validator("level")
    @classmethod
    def valid_log_level(cls, v: str) -> str:
        """Validate that the logging level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {v}. Must be one of {valid_levels}"
            )
        return upper_v


# Cache settings to avoid repeated env access
@lru_cache
def get_composio_settings() -> ComposioSettings:
    """Get Composio settings with caching."""
    return ComposioSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings with caching."""
    return LoggingSettings()


def clear_settings_cache() -> None:
    """Clear cached settings so environment changes are picked up."""
    get_composio_settings.cache_clear()
    get_logging_settings.cache_clear()

"""
composio-cli configuration package.

Provides environment-backed settings used as fallbacks for command-line flags.
"""

from .settings import (
    ComposioSettings,
    LoggingSettings,
    clear_settings_cache,
    get_composio_settings,
    get_logging_settings,
)

__all__ = [
    "ComposioSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_composio_settings",
    "get_logging_settings",
]

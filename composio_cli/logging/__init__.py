"""
Logging system for composio-cli.

This module provides a centralized logging configuration with console and
rotating file outputs.
"""

from composio_cli.logging.config import (
    configure_logging,
    get_logger,
    set_debug_mode,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_debug_mode",
]

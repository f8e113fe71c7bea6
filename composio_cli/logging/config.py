"""
Logging configuration for composio-cli.

stdout belongs to the JSON payload, so every handler set up here writes to
stderr or to a file:
- a coloured console handler on stderr (WARNING by default, DEBUG with --verbose)
- an optional rotating ``composio-cli.log`` in COMPOSIO_CLI_LOGGING_DIR

Handlers hang off the ``composio_cli`` logger, not the root logger, so
messages from the Composio SDK and its HTTP stack are left alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "composio_cli"
LOG_FILE_NAME = "composio-cli.log"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

_debug_enabled = False


class ColorFormatter(logging.Formatter):
    """Console formatter that wraps the level name in an ANSI colour."""

    RESET = "\033[0m"
    LEVEL_STYLES = {
        logging.DEBUG: "\033[36m",  # cyan
        logging.INFO: "\033[32m",  # green
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }

    def format(self, record):
        style = self.LEVEL_STYLES.get(record.levelno)
        if style is None:
            return super().format(record)
        # Colour a copy; file handlers share the same record
        coloured = logging.makeLogRecord(record.__dict__)
        coloured.levelname = f"{style}{record.levelname}{self.RESET}"
        return super().format(coloured)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def set_debug_mode(enabled: bool) -> None:
    """
    Turn package-wide debug logging on or off.

    Args:
        enabled: True lets DEBUG records reach the handlers
    """
    global _debug_enabled
    _debug_enabled = enabled
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if enabled else logging.INFO
    )


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    (Re)build the handlers of the ``composio_cli`` logger.

    Called once per invocation from the root CLI callback. Existing handlers
    are closed and replaced, so repeated calls never duplicate output.

    Args:
        log_dir: Directory for the rotating log file; None disables file logging
        console_level: Minimum level written to stderr
        file_level: Minimum level written to the log file
        max_file_size_mb: Size at which the log file is rotated
        backup_count: Rotated files kept next to the active one
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if _debug_enabled else logging.INFO)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(ColorFormatter(CONSOLE_FORMAT))
    package_logger.addHandler(console)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            filename=directory / LOG_FILE_NAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        rotating.setLevel(file_level)
        rotating.setFormatter(logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(rotating)

    package_logger.debug(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(console_level),
        directory / LOG_FILE_NAME if log_dir else "off",
    )

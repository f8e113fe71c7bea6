"""
Error handling for CLI commands.

Commands catch every exception at their boundary and hand it here; the
handler reports it and the command then exits with status 1.
"""

from typing import Optional

from composio_cli.cli.output import print_error
from composio_cli.cli.state import CLIState
from composio_cli.errors import ComposioCliError, ExternalServiceError
from composio_cli.logging import get_logger

logger = get_logger(__name__)

EXECUTE_HINT = "Tip: use `composio-cli schema --tool <slug>` to view required arguments."


def error_message(e: BaseException) -> str:
    """Return the user-facing message of an exception."""
    if isinstance(e, ComposioCliError):
        return e.message
    return str(e) or e.__class__.__name__


def handle_cli_error(
    e: Exception, state: Optional[CLIState] = None, hint: Optional[str] = None
) -> None:
    """
    Report a command failure on stderr.

    Args:
        e: Exception that occurred
        state: CLI state; verbose mode adds a logged traceback
        hint: Optional static hint printed after the message
    """
    print_error(error_message(e), hint)

    if isinstance(e, ComposioCliError):
        logger.debug("Command failed [%s]: %s", e.error_code, e.to_dict())
    if state is not None and state.verbose:
        cause = e.__cause__ if isinstance(e, ExternalServiceError) else None
        logger.debug("CLI command error: %s", e, exc_info=cause or e)

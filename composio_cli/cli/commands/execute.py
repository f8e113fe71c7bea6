"""Execute command implementation.

Implements `composio-cli execute`, which runs a tool for a user with JSON
arguments given inline (--args) or from a file (--args-file).
"""

from typing import Any, Optional

import typer

from composio_cli.cli.client import build_gateway
from composio_cli.cli.error_handler import EXECUTE_HINT, handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.parsing import parse_json, read_json_file
from composio_cli.cli.state import CLIState
from composio_cli.errors import ConflictingInputsError
from composio_cli.logging import get_logger

logger = get_logger(__name__)

_UNSET = object()


def load_arguments(args: Optional[str], args_file: Optional[str]) -> Any:
    """Load tool arguments from exactly one source.

    Returns:
        The parsed JSON value, or a sentinel when neither flag was given.

    Raises:
        ConflictingInputsError: Both --args and --args-file were given.
        InvalidArgumentsError: The JSON is malformed or the file is unreadable.
    """
    if args and args_file:
        raise ConflictingInputsError("Provide either --args or --args-file, not both.")
    if args:
        return parse_json(args, "--args")
    if args_file:
        return read_json_file(args_file, "--args-file")
    return _UNSET


def build_execute_request(
    user: str,
    args: Optional[str] = None,
    args_file: Optional[str] = None,
    connected_account: Optional[str] = None,
    version: Optional[str] = None,
    skip_version_check: bool = False,
    text: Optional[str] = None,
) -> dict[str, Any]:
    """Assemble the execution request, including only supplied fields."""
    arguments = load_arguments(args, args_file)

    request: dict[str, Any] = {"user_id": user}
    if arguments is not _UNSET:
        request["arguments"] = arguments
    if connected_account:
        request["connected_account_id"] = connected_account
    if version:
        request["version"] = version
    if skip_version_check:
        request["dangerously_skip_version_check"] = True
    if text:
        request["text"] = text
    return request


def execute(
    ctx: typer.Context,
    user: str = typer.Option(..., "--user", help="User id for tool execution"),
    tool: str = typer.Option(..., "--tool", help="Tool slug (e.g. GITHUB_GET_REPOS)"),
    args: Optional[str] = typer.Option(
        None, "--args", help="JSON arguments for the tool"
    ),
    args_file: Optional[str] = typer.Option(
        None, "--args-file", help="Path to a JSON file with arguments"
    ),
    connected_account: Optional[str] = typer.Option(
        None, "--connected-account", help="Connected account id"
    ),
    version: Optional[str] = typer.Option(
        None, "--version", help="Toolkit version (e.g. 20250909_00 or latest)"
    ),
    skip_version_check: bool = typer.Option(
        False,
        "--skip-version-check",
        help="Skip version validation when using latest (dangerous)",
    ),
    text: Optional[str] = typer.Option(
        None, "--text", help="Additional text input for the tool"
    ),
) -> None:
    """Execute a tool for a user.

    Examples:
        composio-cli execute --user u1 --tool GITHUB_GET_REPOS --args '{"owner": "me"}'

        composio-cli execute --user u1 --tool GMAIL_SEND_EMAIL --args-file email.json
    """
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)
        request = build_execute_request(
            user,
            args=args,
            args_file=args_file,
            connected_account=connected_account,
            version=version,
            skip_version_check=skip_version_check,
            text=text,
        )
        logger.debug("Executing %s for %s", tool, user)
        print_json(gateway.execute(tool, request), state)
    except Exception as e:
        handle_cli_error(e, state, hint=EXECUTE_HINT)
        raise typer.Exit(1) from None

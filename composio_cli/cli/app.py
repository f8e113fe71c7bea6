"""CLI app entry point.

Provides the main Typer app with the global flags (--api-key,
--toolkit-versions, --raw, --verbose). The callback stores an immutable
CLIState in the Typer context for commands to access.
"""

import logging
from typing import Optional

import pydantic
import typer

from composio_cli.cli.commands import (
    auth_url,
    connections,
    execute,
    schema,
    toolkits,
    tools,
)
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.state import CLIState
from composio_cli.config import get_logging_settings
from composio_cli.errors import InvalidConfigurationError
from composio_cli.logging import configure_logging, set_debug_mode

app = typer.Typer(
    name="composio-cli",
    help="CLI for listing and invoking Composio toolkits and tools.",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    try:
        settings = get_logging_settings()
    except pydantic.ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid logging configuration: {e.errors()[0]['msg']}"
        ) from e

    set_debug_mode(verbose)
    console_level = logging.DEBUG if verbose else getattr(logging, settings.level)
    configure_logging(log_dir=settings.dir, console_level=console_level)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Composio API key (defaults to COMPOSIO_API_KEY)",
    ),
    toolkit_versions: Optional[str] = typer.Option(
        None,
        "--toolkit-versions",
        metavar="JSON",
        help="JSON map of toolkit versions for Composio client initialization",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Output raw JSON without pretty formatting",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs on stderr",
    ),
) -> None:
    """composio-cli - Composio toolkits, tools and connections from the shell."""
    # Immutable state; only stored in the context once logging is set up
    state = CLIState(
        api_key=api_key,
        toolkit_versions=toolkit_versions,
        raw=raw,
        verbose=verbose,
    )

    try:
        _setup_logging(verbose)
    except InvalidConfigurationError as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

    ctx.obj = state


app.command("toolkits")(toolkits)
app.command("auth-url")(auth_url)
app.command("schema")(schema)
app.command("connections")(connections)
app.command("tools")(tools)
app.command("execute")(execute)


if __name__ == "__main__":
    app()

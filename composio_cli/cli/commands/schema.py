"""Schema command implementation.

Implements `composio-cli schema`, which shows a tool's input parameters.
"""

import typer

from composio_cli.cli.client import build_gateway
from composio_cli.cli.client.models import ToolDefinition
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.state import CLIState


def schema(
    ctx: typer.Context,
    tool: str = typer.Option(
        ..., "--tool", help="Tool slug (e.g. GITHUB_GET_REPOS)"
    ),
    full: bool = typer.Option(
        False, "--full", help="Return the full tool definition"
    ),
) -> None:
    """Get the input schema for a tool (possible arguments)."""
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)
        definition = gateway.get_tool(tool)

        if full:
            print_json(definition, state)
            return

        print_json(ToolDefinition.model_validate(definition).schema_summary(), state)
    except Exception as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

"""CLI command implementations.

One module per subcommand. Each module exposes the Typer command function
and the pure request builder it uses, so validation can be tested without
invoking the CLI.
"""

from composio_cli.cli.commands.auth_url import auth_url
from composio_cli.cli.commands.connections import connections
from composio_cli.cli.commands.execute import execute
from composio_cli.cli.commands.schema import schema
from composio_cli.cli.commands.toolkits import toolkits
from composio_cli.cli.commands.tools import tools

__all__ = [
    "auth_url",
    "connections",
    "execute",
    "schema",
    "toolkits",
    "tools",
]

"""
Command Line Interface for composio-cli.

Commands: toolkits, auth-url, schema, connections, tools, execute.
"""

from composio_cli.cli.app import app

__all__ = ["app"]

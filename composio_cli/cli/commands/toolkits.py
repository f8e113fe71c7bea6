"""Toolkits command implementation.

Implements `composio-cli toolkits`, which fetches a single toolkit by slug
or lists toolkits with optional filters.
"""

from typing import Any, Optional

import typer

from composio_cli.cli.client import build_gateway
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.parsing import parse_limit
from composio_cli.cli.state import CLIState
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def build_toolkit_query(
    category: Optional[str] = None,
    managed_by: Optional[str] = None,
    sort_by: Optional[str] = None,
    cursor: Optional[str] = None,
    limit: Optional[str] = None,
) -> dict[str, Any]:
    """Build the listing query, keeping only the flags that were supplied."""
    query: dict[str, Any] = {}
    if category:
        query["category"] = category
    if managed_by:
        query["managed_by"] = managed_by
    if sort_by:
        query["sort_by"] = sort_by
    if cursor:
        query["cursor"] = cursor
    parsed_limit = parse_limit(limit)
    if parsed_limit is not None:
        query["limit"] = parsed_limit
    return query


def toolkits(
    ctx: typer.Context,
    slug: Optional[str] = typer.Option(
        None, "--slug", help="Fetch a single toolkit by slug"
    ),
    category: Optional[str] = typer.Option(
        None, "--category", help="Filter by category slug"
    ),
    managed_by: Optional[str] = typer.Option(
        None, "--managed-by", help="Filter by managedBy: all|composio|project"
    ),
    sort_by: Optional[str] = typer.Option(
        None, "--sort-by", help="Sort by: usage|alphabetically"
    ),
    cursor: Optional[str] = typer.Option(None, "--cursor", help="Pagination cursor"),
    limit: Optional[str] = typer.Option(
        None, "--limit", help="Limit number of results"
    ),
) -> None:
    """List available toolkits.

    Examples:
        composio-cli toolkits --limit 3

        composio-cli toolkits --slug github
    """
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)

        if slug:
            result = gateway.get_toolkit(slug)
        else:
            query = build_toolkit_query(category, managed_by, sort_by, cursor, limit)
            logger.debug("Listing toolkits with query %s", query)
            result = gateway.list_toolkits(query)

        print_json(result, state)
    except Exception as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

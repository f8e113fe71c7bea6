"""Connections command implementation.

Implements `composio-cli connections`, which lists the connected accounts
of one user.
"""

from typing import Any, Optional

import typer

from composio_cli.cli.client import build_gateway
from composio_cli.cli.client.models import ConnectedAccountPage
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.parsing import parse_csv_option, parse_limit
from composio_cli.cli.state import CLIState
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def build_connection_query(
    user: str,
    toolkits: Optional[str] = None,
    statuses: Optional[str] = None,
    auth_config_ids: Optional[str] = None,
    order_by: Optional[str] = None,
    cursor: Optional[str] = None,
    limit: Optional[str] = None,
) -> dict[str, Any]:
    """Build a connected-account query scoped to a single user."""
    query: dict[str, Any] = {"user_ids": [user]}

    toolkit_slugs = parse_csv_option(toolkits)
    if toolkit_slugs is not None:
        query["toolkit_slugs"] = toolkit_slugs
    status_list = parse_csv_option(statuses)
    if status_list is not None:
        query["statuses"] = status_list
    auth_config_list = parse_csv_option(auth_config_ids)
    if auth_config_list is not None:
        query["auth_config_ids"] = auth_config_list
    if order_by:
        query["order_by"] = order_by
    if cursor:
        query["cursor"] = cursor
    parsed_limit = parse_limit(limit)
    if parsed_limit is not None:
        query["limit"] = parsed_limit

    return query


def connections(
    ctx: typer.Context,
    user: str = typer.Option(..., "--user", help="User id to list connections for"),
    toolkits: Optional[str] = typer.Option(
        None, "--toolkits", help="Comma-separated toolkit slugs"
    ),
    statuses: Optional[str] = typer.Option(
        None, "--statuses", help="Comma-separated statuses (e.g. ACTIVE,INITIATED)"
    ),
    auth_config_ids: Optional[str] = typer.Option(
        None, "--auth-config-ids", help="Comma-separated auth config ids"
    ),
    order_by: Optional[str] = typer.Option(
        None, "--order-by", help="Order by: created_at|updated_at"
    ),
    cursor: Optional[str] = typer.Option(None, "--cursor", help="Pagination cursor"),
    limit: Optional[str] = typer.Option(
        None, "--limit", help="Limit number of results"
    ),
    full: bool = typer.Option(
        False, "--full", help="Return the full connected accounts response"
    ),
) -> None:
    """List connected accounts for a user."""
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)
        query = build_connection_query(
            user, toolkits, statuses, auth_config_ids, order_by, cursor, limit
        )
        logger.debug("Listing connected accounts with query %s", query)
        result = gateway.list_connected_accounts(query)

        if full:
            print_json(result, state)
            return

        page = ConnectedAccountPage.model_validate(result)
        print_json([item.summary() for item in page.items], state)
    except Exception as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

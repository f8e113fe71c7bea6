"""Auth URL command implementation.

Implements `composio-cli auth-url`. Reports existing ACTIVE connections for
a user/toolkit pair, or starts a new authorization and returns its redirect
URL when there are none (or when --force is given).
"""

from typing import Any, Optional

import typer

from composio_cli.cli.client import ComposioGateway, build_gateway
from composio_cli.cli.client.models import ConnectedAccountPage, ConnectionRequest
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.state import CLIState
from composio_cli.logging import get_logger

logger = get_logger(__name__)

EXISTING_CONNECTIONS_PAGE_SIZE = 50


def build_active_connection_query(
    user: str, toolkit: str, auth_config_id: Optional[str] = None
) -> dict[str, Any]:
    """Query for the user's ACTIVE connections to one toolkit."""
    query: dict[str, Any] = {
        "user_ids": [user],
        "toolkit_slugs": [toolkit],
        "statuses": ["ACTIVE"],
        "limit": EXISTING_CONNECTIONS_PAGE_SIZE,
    }
    if auth_config_id:
        query["auth_config_ids"] = [auth_config_id]
    return query


def resolve_auth_url(
    gateway: ComposioGateway,
    user: str,
    toolkit: str,
    auth_config_id: Optional[str] = None,
    force: bool = False,
) -> dict[str, Any]:
    """Decide between reporting existing connections and authorizing anew.

    Args:
        gateway: Composio gateway for this invocation
        user: User id
        toolkit: Toolkit slug
        auth_config_id: Optional auth config to scope to and authorize with
        force: Skip the existing-connection check

    Returns:
        ``{"authenticated": True, "connectedAccounts": [...]}`` when an ACTIVE
        connection exists, otherwise ``{"authenticated": False, "redirectUrl",
        "connectionRequestId", "status"}``.
    """
    if not force:
        query = build_active_connection_query(user, toolkit, auth_config_id)
        existing = ConnectedAccountPage.model_validate(
            gateway.list_connected_accounts(query)
        )
        if existing.items:
            logger.debug(
                "Found %d active connection(s) for %s/%s",
                len(existing.items),
                user,
                toolkit,
            )
            return {
                "authenticated": True,
                "connectedAccounts": [
                    item.summary(include_auth_config=True) for item in existing.items
                ],
            }

    request = ConnectionRequest.model_validate(
        gateway.authorize(user, toolkit, auth_config_id)
    )
    return {
        "authenticated": False,
        "redirectUrl": request.redirect_url,
        "connectionRequestId": request.id,
        "status": request.status,
    }


def auth_url(
    ctx: typer.Context,
    user: str = typer.Option(..., "--user", help="User id for authorization"),
    toolkit: str = typer.Option(..., "--toolkit", help="Toolkit slug to authorize"),
    auth_config_id: Optional[str] = typer.Option(
        None, "--auth-config-id", help="Auth config id to use (optional)"
    ),
    force: bool = typer.Option(
        False, "--force", help="Always create a new connection request"
    ),
) -> None:
    """Get an auth redirect URL for a user/toolkit if not authenticated."""
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)
        payload = resolve_auth_url(gateway, user, toolkit, auth_config_id, force)
        print_json(payload, state)
    except Exception as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

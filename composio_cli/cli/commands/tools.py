"""Tools command implementation.

Implements `composio-cli tools`, which lists the tools available to a user.
Exactly one way of selecting tools is allowed per call:

- ``--search`` on its own (no ``--limit`` either)
- ``--tools`` on its own
- any mix of ``--toolkits``, ``--tags``, ``--auth-config-ids``, with
  ``--scopes`` only when ``--toolkits`` names exactly one toolkit

``--all`` ignores every filter and returns the full tool enum.
"""

from typing import Any, Optional

import typer

from composio_cli.cli.client import build_gateway
from composio_cli.cli.error_handler import handle_cli_error
from composio_cli.cli.output import print_json
from composio_cli.cli.parsing import parse_csv_option, parse_limit
from composio_cli.cli.state import CLIState
from composio_cli.errors import (
    ConflictingFiltersError,
    InvalidScopeUsageError,
    MissingFilterError,
)
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def build_tool_filters(
    toolkits: Optional[str] = None,
    tools: Optional[str] = None,
    search: Optional[str] = None,
    tags: Optional[str] = None,
    scopes: Optional[str] = None,
    auth_config_ids: Optional[str] = None,
    limit: Optional[str] = None,
    important: bool = False,
) -> dict[str, Any]:
    """Validate the filter flags and assemble the filter set.

    Raises:
        MissingFilterError: No discriminating filter was given.
        ConflictingFiltersError: --search or --tools combined with other filters,
            or --limit combined with --search.
        InvalidScopeUsageError: --scopes without exactly one toolkit.
    """
    toolkit_list = parse_csv_option(toolkits)
    tool_list = parse_csv_option(tools)
    tag_list = parse_csv_option(tags)
    scope_list = parse_csv_option(scopes)
    auth_config_list = parse_csv_option(auth_config_ids)
    parsed_limit = parse_limit(limit)
    has_search = bool(search)

    if (
        toolkit_list is None
        and tool_list is None
        and not has_search
        and tag_list is None
        and auth_config_list is None
    ):
        raise MissingFilterError(
            "Provide --toolkits, --tools, --search, --tags, or --auth-config-ids (or use --all)."
        )

    if has_search:
        others = (toolkit_list, tool_list, tag_list, scope_list, auth_config_list)
        if any(value is not None for value in others):
            raise ConflictingFiltersError(
                "--search cannot be combined with other filters."
            )
        if parsed_limit is not None:
            raise ConflictingFiltersError("--limit cannot be used with --search.")

    if tool_list is not None:
        others = (toolkit_list, tag_list, scope_list, auth_config_list)
        if any(value is not None for value in others) or has_search:
            raise ConflictingFiltersError(
                "--tools cannot be combined with other filters."
            )

    if scope_list is not None and (toolkit_list is None or len(toolkit_list) != 1):
        raise InvalidScopeUsageError(
            "--scopes requires exactly one toolkit in --toolkits."
        )

    filters: dict[str, Any] = {}
    if tool_list is not None:
        filters["tools"] = tool_list
    if toolkit_list is not None:
        filters["toolkits"] = toolkit_list
    if tag_list is not None:
        filters["tags"] = tag_list
    if scope_list is not None:
        filters["scopes"] = scope_list
    if auth_config_list is not None:
        filters["auth_config_ids"] = auth_config_list
    if has_search:
        filters["search"] = search
    if parsed_limit is not None:
        filters["limit"] = parsed_limit
    if important:
        filters["important"] = True
    return filters


def tools(
    ctx: typer.Context,
    user: str = typer.Option(..., "--user", help="User id for tool listing"),
    toolkits: Optional[str] = typer.Option(
        None, "--toolkits", help="Comma-separated toolkit slugs"
    ),
    tool_slugs: Optional[str] = typer.Option(
        None, "--tools", help="Comma-separated tool slugs"
    ),
    search: Optional[str] = typer.Option(
        None, "--search", help="Search term (standalone)"
    ),
    tags: Optional[str] = typer.Option(None, "--tags", help="Comma-separated tags"),
    scopes: Optional[str] = typer.Option(
        None,
        "--scopes",
        help="Comma-separated scopes (requires exactly one toolkit)",
    ),
    auth_config_ids: Optional[str] = typer.Option(
        None, "--auth-config-ids", help="Comma-separated auth config ids"
    ),
    limit: Optional[str] = typer.Option(
        None, "--limit", help="Limit number of results"
    ),
    important: bool = typer.Option(False, "--important", help="Only important tools"),
    all_tools: bool = typer.Option(
        False, "--all", help="List all tools enum (ignores filters)"
    ),
) -> None:
    """List tools for a user (filter by toolkit, tool slug, or search)."""
    state: CLIState = ctx.obj

    try:
        gateway = build_gateway(state)

        if all_tools:
            print_json(gateway.list_tools_enum(), state)
            return

        filters = build_tool_filters(
            toolkits=toolkits,
            tools=tool_slugs,
            search=search,
            tags=tags,
            scopes=scopes,
            auth_config_ids=auth_config_ids,
            limit=limit,
            important=important,
        )
        logger.debug("Listing tools for %s with filters %s", user, filters)
        print_json(gateway.list_tools(user, filters), state)
    except Exception as e:
        handle_cli_error(e, state)
        raise typer.Exit(1) from None

"""Composio client construction and access.

Usage:
    from composio_cli.cli.client import build_gateway

    gateway = build_gateway(state)
    toolkit = gateway.get_toolkit("github")
"""

from composio_cli.cli.client.factory import (
    build_client_config,
    build_gateway,
    resolve_api_key,
)
from composio_cli.cli.client.gateway import ComposioGateway, to_jsonable

__all__ = [
    "ComposioGateway",
    "build_client_config",
    "build_gateway",
    "resolve_api_key",
    "to_jsonable",
]

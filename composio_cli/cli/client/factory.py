"""Client factory: one Composio client per CLI invocation."""

from typing import Any

from composio import Composio

from composio_cli.cli.client.gateway import ComposioGateway
from composio_cli.cli.parsing import parse_json
from composio_cli.cli.state import CLIState
from composio_cli.config import get_composio_settings
from composio_cli.errors import InvalidConfigurationError, MissingCredentialError
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def resolve_api_key(state: CLIState) -> str:
    """Return --api-key, falling back to COMPOSIO_API_KEY.

    Raises:
        MissingCredentialError: If neither is set.
    """
    api_key = state.api_key or get_composio_settings().api_key
    if not api_key:
        raise MissingCredentialError(
            "Missing Composio API key. Provide --api-key or set COMPOSIO_API_KEY."
        )
    return api_key


def build_client_config(state: CLIState) -> dict[str, Any]:
    """Assemble keyword arguments for the SDK client constructor."""
    config: dict[str, Any] = {"api_key": resolve_api_key(state)}
    if state.toolkit_versions:
        config["toolkit_versions"] = parse_json(
            state.toolkit_versions,
            "--toolkit-versions",
            error_cls=InvalidConfigurationError,
        )
    return config


def build_gateway(state: CLIState) -> ComposioGateway:
    """Construct the Composio client for this invocation.

    No network access happens here; credential and configuration problems
    are reported before any command logic runs.
    """
    config = build_client_config(state)
    logger.debug(
        "Creating Composio client (toolkit_versions=%s)",
        config.get("toolkit_versions"),
    )
    return ComposioGateway(Composio(**config))

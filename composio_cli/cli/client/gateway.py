"""Gateway over the Composio SDK.

``ComposioGateway`` is the only place the CLI touches the SDK. Each method
issues one SDK call, converts the result to JSON-compatible Python values
and wraps any SDK failure in :class:`ExternalServiceError` with the SDK's
message unchanged. Nothing is retried.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pydantic_core import to_jsonable_python

from composio_cli.cli.client.models import AuthConfigPage, ToolkitPage
from composio_cli.errors import ExternalServiceError
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def _public_attributes(value: Any) -> Any:
    """Serialize plain SDK objects that are not pydantic models."""
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return str(value)


def to_jsonable(value: Any) -> Any:
    """Convert an SDK response into dicts, lists and scalars."""
    return to_jsonable_python(value, fallback=_public_attributes)


# Filter keys only the tool listing endpoint accepts
RAW_LISTING_FILTERS = frozenset({"tags", "auth_config_ids", "important"})


def build_raw_tool_query(filters: dict[str, Any]) -> dict[str, Any]:
    """Translate a tools filter set into ``client.tools.list`` parameters."""
    params: dict[str, Any] = {}
    if filters.get("toolkits"):
        params["toolkit_slug"] = ",".join(filters["toolkits"])
    for key in ("tags", "scopes", "auth_config_ids", "limit"):
        if key in filters:
            params[key] = filters[key]
    if filters.get("important"):
        params["important"] = "true"
    return params


class ComposioGateway:
    """Thin, documented facade over a ``composio.Composio`` instance."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @contextmanager
    def _call(self, operation: str) -> Iterator[None]:
        logger.debug("Calling Composio %s", operation)
        try:
            yield
        except Exception as e:
            raise ExternalServiceError(
                message=str(e) or e.__class__.__name__,
                details={"operation": operation},
            ) from e

    # --- Toolkits ---

    def get_toolkit(self, slug: str) -> Any:
        with self._call("toolkits.get"):
            return to_jsonable(self._client.toolkits.get(slug))

    def list_toolkits(self, query: Optional[dict[str, Any]] = None) -> Any:
        with self._call("toolkits.get"):
            if query:
                return to_jsonable(self._client.toolkits.get(query=query))
            return to_jsonable(self._client.toolkits.get())

    def list_toolkit_page(
        self, limit: int, cursor: Optional[str] = None
    ) -> ToolkitPage:
        params: dict[str, Any] = {"limit": limit}
        if cursor:
            params["cursor"] = cursor
        with self._call("toolkits.list"):
            response = to_jsonable(self._client.client.toolkits.list(**params))
        return ToolkitPage.model_validate(response)

    def authorize(
        self, user_id: str, toolkit: str, auth_config_id: Optional[str] = None
    ) -> Any:
        """Start a new connection for ``user_id``.

        With an auth config id the connection is initiated against that auth
        config; otherwise the SDK picks the toolkit's default auth config.
        """
        if auth_config_id:
            with self._call("connected_accounts.initiate"):
                return to_jsonable(
                    self._client.connected_accounts.initiate(
                        user_id=user_id, auth_config_id=auth_config_id
                    )
                )
        with self._call("toolkits.authorize"):
            return to_jsonable(
                self._client.toolkits.authorize(user_id=user_id, toolkit=toolkit)
            )

    # --- Auth configs ---

    def list_auth_configs(self, toolkit: str) -> AuthConfigPage:
        with self._call("auth_configs.list"):
            response = to_jsonable(
                self._client.client.auth_configs.list(toolkit_slug=toolkit)
            )
        return AuthConfigPage.model_validate(response)

    # --- Tools ---

    def get_tool(self, slug: str) -> Any:
        with self._call("tools.get_raw_composio_tool_by_slug"):
            return to_jsonable(self._client.tools.get_raw_composio_tool_by_slug(slug))

    def list_tools(self, user_id: str, filters: dict[str, Any]) -> Any:
        """List tools for ``user_id``.

        ``tools.get`` only understands tools/search/toolkits/scopes/limit, so
        filter sets using tags, auth config ids or the important flag go to
        the tool listing endpoint and return its raw tool definitions.
        """
        if not RAW_LISTING_FILTERS.intersection(filters):
            with self._call("tools.get"):
                return to_jsonable(self._client.tools.get(user_id, **filters))

        params = build_raw_tool_query(filters)
        logger.debug("Listing tools for %s via tools.list %s", user_id, params)
        with self._call("tools.list"):
            response = self._client.client.tools.list(**params)
            return to_jsonable(response.items)

    def list_tools_enum(self) -> Any:
        with self._call("tools.retrieve_enum"):
            return to_jsonable(self._client.client.tools.retrieve_enum())

    def execute(self, slug: str, request: dict[str, Any]) -> Any:
        params = dict(request)
        params.setdefault("arguments", {})
        with self._call("tools.execute"):
            return to_jsonable(self._client.tools.execute(slug, **params))

    # --- Connected accounts ---

    def list_connected_accounts(self, query: dict[str, Any]) -> Any:
        with self._call("connected_accounts.list"):
            return to_jsonable(self._client.connected_accounts.list(**query))

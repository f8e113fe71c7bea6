"""
Global test fixtures for composio-cli.

Provides a deterministic in-memory stand-in for ``ComposioGateway`` and the
unconfigured-toolkit finder used by the auth-url tests.
"""

import copy
import logging
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from composio_cli.cli.client.models import AuthConfigPage, ToolkitPage
from composio_cli.config import clear_settings_cache
from composio_cli.errors import ExternalServiceError
from composio_cli.logging import set_debug_mode

FINDER_PAGE_SIZE = 50
FINDER_MAX_PAGES = 6


class FakeComposioGateway:
    """In-memory gateway seeded per test.

    Mirrors the public methods of ``ComposioGateway`` and records every call
    in ``calls`` as ``(method, args)`` tuples.
    """

    def __init__(
        self,
        toolkits: Optional[list[dict[str, Any]]] = None,
        tools: Optional[list[dict[str, Any]]] = None,
        connected_accounts: Optional[list[dict[str, Any]]] = None,
        auth_configs: Optional[dict[str, list[dict[str, Any]]]] = None,
        execute_result: Any = None,
    ) -> None:
        self.toolkits = toolkits or []
        self.tools = tools or []
        self.connected_accounts = connected_accounts or []
        self.auth_configs = auth_configs or {}
        self.execute_result = execute_result
        self.calls: list[tuple[str, tuple]] = []
        self._next_request = 0

    def called(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)

    def calls_to(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, copy.deepcopy(args)))

    # --- Toolkits ---

    def get_toolkit(self, slug: str) -> dict[str, Any]:
        self._record("get_toolkit", slug)
        for toolkit in self.toolkits:
            if toolkit["slug"] == slug:
                return copy.deepcopy(toolkit)
        raise ExternalServiceError(f"Toolkit {slug} not found")

    def list_toolkits(self, query: Optional[dict[str, Any]] = None) -> list[dict]:
        self._record("list_toolkits", query)
        items = copy.deepcopy(self.toolkits)
        if query and query.get("category"):
            items = [t for t in items if t.get("category") == query["category"]]
        if query and isinstance(query.get("limit"), int):
            items = items[: query["limit"]]
        return items

    def list_toolkit_page(self, limit: int, cursor: Optional[str] = None) -> ToolkitPage:
        self._record("list_toolkit_page", limit, cursor)
        start = int(cursor) if cursor else 0
        end = start + limit
        next_cursor = str(end) if end < len(self.toolkits) else None
        return ToolkitPage.model_validate(
            {"items": self.toolkits[start:end], "next_cursor": next_cursor}
        )

    def authorize(
        self, user_id: str, toolkit: str, auth_config_id: Optional[str] = None
    ) -> dict[str, Any]:
        self._record("authorize", user_id, toolkit, auth_config_id)
        known = next((t for t in self.toolkits if t["slug"] == toolkit), None)
        managed = known and (
            known.get("no_auth") or known.get("composio_managed_auth_schemes")
        )
        if not auth_config_id and not managed and not self.auth_configs.get(toolkit):
            raise ExternalServiceError(f"No auth configs found for toolkit {toolkit}")
        self._next_request += 1
        request_id = f"cr_{self._next_request}"
        return {
            "id": request_id,
            "redirect_url": f"https://connect.composio.test/{toolkit}/{request_id}",
            "status": "INITIATED",
        }

    # --- Auth configs ---

    def list_auth_configs(self, toolkit: str) -> AuthConfigPage:
        self._record("list_auth_configs", toolkit)
        return AuthConfigPage.model_validate(
            {"items": self.auth_configs.get(toolkit, [])}
        )

    # --- Tools ---

    def get_tool(self, slug: str) -> dict[str, Any]:
        self._record("get_tool", slug)
        for tool in self.tools:
            if tool["slug"] == slug:
                return copy.deepcopy(tool)
        raise ExternalServiceError(f"Tool {slug} not found")

    def list_tools(self, user_id: str, filters: dict[str, Any]) -> list[dict]:
        self._record("list_tools", user_id, filters)
        items = self.tools
        if "tools" in filters:
            items = [t for t in items if t["slug"] in filters["tools"]]
        if "toolkits" in filters:
            items = [t for t in items if t["toolkit"]["slug"] in filters["toolkits"]]
        if "limit" in filters:
            items = items[: int(filters["limit"])]
        return [
            {"type": "function", "function": {"name": t["slug"]}} for t in items
        ]

    def list_tools_enum(self) -> list[str]:
        self._record("list_tools_enum")
        return [t["slug"] for t in self.tools]

    def execute(self, slug: str, request: dict[str, Any]) -> Any:
        self._record("execute", slug, request)
        if not any(t["slug"] == slug for t in self.tools):
            raise ExternalServiceError(f"Tool {slug} not found")
        if self.execute_result is not None:
            return copy.deepcopy(self.execute_result)
        return {"successful": True, "error": None, "data": {}}

    # --- Connected accounts ---

    def list_connected_accounts(self, query: dict[str, Any]) -> dict[str, Any]:
        self._record("list_connected_accounts", query)
        items = []
        for account in self.connected_accounts:
            if account["user_id"] not in query["user_ids"]:
                continue
            if "toolkit_slugs" in query and (
                account["toolkit"]["slug"] not in query["toolkit_slugs"]
            ):
                continue
            if "statuses" in query and account["status"] not in query["statuses"]:
                continue
            if "auth_config_ids" in query and (
                account["auth_config"]["id"] not in query["auth_config_ids"]
            ):
                continue
            items.append(copy.deepcopy(account))
        if isinstance(query.get("limit"), int):
            items = items[: query["limit"]]
        return {"items": items, "next_cursor": None, "total_pages": 1}


def find_unconfigured_toolkit(gateway: Any) -> Optional[str]:
    """Find a toolkit that needs auth but has no auth config.

    Walks at most FINDER_MAX_PAGES pages of FINDER_PAGE_SIZE toolkits and
    stops early when a match is found or there is no next cursor.
    """
    cursor = None
    for _ in range(FINDER_MAX_PAGES):
        page = gateway.list_toolkit_page(limit=FINDER_PAGE_SIZE, cursor=cursor)
        for toolkit in page.items:
            if not toolkit.needs_auth_config:
                continue
            if not gateway.list_auth_configs(toolkit.slug).items:
                return toolkit.slug
        cursor = page.next_cursor
        if not cursor:
            break
    return None


def _account(
    account_id: str, user_id: str, toolkit: str, status: str, auth_config_id: str
) -> dict[str, Any]:
    return {
        "id": account_id,
        "user_id": user_id,
        "status": status,
        "toolkit": {"slug": toolkit},
        "auth_config": {"id": auth_config_id, "is_composio_managed": True},
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_toolkits() -> list[dict[str, Any]]:
    """Toolkits covering managed, no-auth and unconfigured cases."""
    return [
        {
            "slug": "twitter",
            "name": "Twitter",
            "category": "social",
            "no_auth": False,
            "composio_managed_auth_schemes": ["OAUTH2"],
        },
        {
            "slug": "gmail",
            "name": "Gmail",
            "category": "email",
            "no_auth": False,
            "composio_managed_auth_schemes": ["OAUTH2"],
        },
        {
            "slug": "hackernews",
            "name": "Hacker News",
            "category": "news",
            "no_auth": True,
            "composio_managed_auth_schemes": [],
        },
        {
            "slug": "perplexityai",
            "name": "Perplexity AI",
            "category": "ai",
            "no_auth": False,
            "composio_managed_auth_schemes": [],
        },
    ]


@pytest.fixture
def sample_tools() -> list[dict[str, Any]]:
    return [
        {
            "slug": "TWITTER_USER_LOOKUP_ME",
            "name": "Look up me",
            "description": "Returns the authenticated user",
            "toolkit": {"slug": "twitter", "name": "Twitter"},
            "input_parameters": {"type": "object", "properties": {}},
            "output_parameters": {"type": "object"},
            "version": "20250909_00",
            "available_versions": ["20250909_00"],
            "tags": ["users"],
        },
        {
            "slug": "TWITTER_CREATION_OF_A_POST",
            "name": "Create a post",
            "description": "Creates a post",
            "toolkit": {"slug": "twitter", "name": "Twitter"},
            "input_parameters": {
                "type": "object",
                "properties": {"text": {"type": "string"}},
                "required": ["text"],
            },
            "version": "20250909_00",
            "available_versions": ["20250909_00"],
            "tags": ["tweets"],
        },
        {
            "slug": "GMAIL_SEND_EMAIL",
            "name": "Send email",
            "description": "Sends an email",
            "toolkit": {"slug": "gmail", "name": "Gmail"},
            "input_parameters": {
                "type": "object",
                "properties": {"recipient_email": {"type": "string"}},
            },
            "version": "20250901_01",
            "available_versions": ["20250901_01", "20250801_00"],
            "tags": [],
        },
    ]


@pytest.fixture
def sample_connected_accounts() -> list[dict[str, Any]]:
    return [
        _account("ca_tw_1", "user-1", "twitter", "ACTIVE", "ac_twitter"),
        _account("ca_gm_1", "user-1", "gmail", "INITIATED", "ac_gmail"),
        _account("ca_tw_2", "user-2", "twitter", "ACTIVE", "ac_twitter"),
    ]


@pytest.fixture
def fake_gateway(sample_toolkits, sample_tools, sample_connected_accounts):
    """Gateway seeded with twitter (connected), gmail (not connected),
    hackernews (no auth) and perplexityai (no auth config)."""
    return FakeComposioGateway(
        toolkits=sample_toolkits,
        tools=sample_tools,
        connected_accounts=sample_connected_accounts,
        auth_configs={
            "twitter": [{"id": "ac_twitter"}],
            "gmail": [{"id": "ac_gmail"}],
        },
    )


@pytest.fixture
def gateway_factory():
    """Build a FakeComposioGateway with custom seed data."""
    return FakeComposioGateway


@pytest.fixture
def unconfigured_toolkit_finder():
    """The unconfigured-toolkit finder, usable with fake or live gateways."""
    return find_unconfigured_toolkit


@pytest.fixture
def api_key_env(monkeypatch):
    """Provide COMPOSIO_API_KEY and reset cached settings around the test."""
    monkeypatch.setenv("COMPOSIO_API_KEY", "test-api-key")
    clear_settings_cache()
    yield "test-api-key"
    clear_settings_cache()


@pytest.fixture
def no_api_key_env(monkeypatch):
    """Remove COMPOSIO_API_KEY and reset cached settings around the test."""
    monkeypatch.delenv("COMPOSIO_API_KEY", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def install_gateway(monkeypatch):
    """Route build_gateway to a given gateway while keeping credential checks.

    Returns a function taking the gateway and returning the mocked
    ``Composio`` class so tests can assert on constructor arguments.
    """

    def _install(gateway: Any) -> MagicMock:
        sdk_class = MagicMock(name="Composio")
        monkeypatch.setattr("composio_cli.cli.client.factory.Composio", sdk_class)
        monkeypatch.setattr(
            "composio_cli.cli.client.factory.ComposioGateway",
            lambda client: gateway,
        )
        return sdk_class

    return _install


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers bound to CliRunner streams after each test."""
    yield
    package_logger = logging.getLogger("composio_cli")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    set_debug_mode(False)

"""Response schemas for the parts of Composio responses the CLI reshapes.

The gateway hands commands plain JSON-compatible values. Commands that
project a response validate it into one of these models instead of probing
for optional attributes; unknown fields are ignored.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ToolkitRef(_ResponseModel):
    """Nested toolkit reference carried by tools and connected accounts."""

    slug: Optional[str] = None


class AuthConfigRef(_ResponseModel):
    """Nested auth config reference on a connected account."""

    id: Optional[str] = None


class ConnectedAccount(_ResponseModel):
    """One item of a connected-account listing."""

    id: Optional[str] = None
    status: Optional[str] = None
    toolkit: Optional[ToolkitRef] = None
    auth_config: Optional[AuthConfigRef] = None

    @property
    def toolkit_slug(self) -> Optional[str]:
        return self.toolkit.slug if self.toolkit else None

    @property
    def auth_config_id(self) -> Optional[str]:
        return self.auth_config.id if self.auth_config else None

    def summary(self, include_auth_config: bool = False) -> dict[str, Any]:
        """Project to ``{id, status, toolkit}`` (plus ``authConfigId``)."""
        data: dict[str, Any] = {
            "id": self.id,
            "status": self.status,
            "toolkit": self.toolkit_slug,
        }
        if include_auth_config:
            data["authConfigId"] = self.auth_config_id
        return data


class ConnectedAccountPage(_ResponseModel):
    """A page of connected accounts."""

    items: list[ConnectedAccount] = Field(default_factory=list)


class ConnectionRequest(_ResponseModel):
    """Result of initiating a new authorization flow."""

    id: Optional[str] = None
    redirect_url: Optional[str] = None
    status: Optional[str] = None


class ToolDefinition(_ResponseModel):
    """Raw tool definition as returned by the tool lookup."""

    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    toolkit: Optional[ToolkitRef] = None
    input_parameters: Optional[dict[str, Any]] = None
    version: Optional[str] = None
    available_versions: Optional[list[str]] = None

    def schema_summary(self) -> dict[str, Any]:
        """Project to the default `schema` command output."""
        return {
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "toolkit": self.toolkit.slug if self.toolkit else None,
            "inputParameters": self.input_parameters,
            "version": self.version,
            "availableVersions": self.available_versions,
        }


class ToolkitSummary(_ResponseModel):
    """The toolkit fields needed to decide whether auth can be configured."""

    slug: str
    no_auth: Optional[bool] = None
    composio_managed_auth_schemes: Optional[list[str]] = None

    @property
    def needs_auth_config(self) -> bool:
        """True when the toolkit requires auth that Composio does not manage."""
        return not self.no_auth and not self.composio_managed_auth_schemes


class ToolkitPage(_ResponseModel):
    """A cursor-paginated page of toolkits."""

    items: list[ToolkitSummary] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class AuthConfigPage(_ResponseModel):
    """A page of auth configs; items are kept as raw mappings."""

    items: list[dict[str, Any]] = Field(default_factory=list)

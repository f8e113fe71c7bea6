"""
Exception hierarchy for composio-cli.

Every failure the CLI reports is one of these exceptions. Local validation
errors are raised before any SDK call is made; ``ExternalServiceError`` wraps
whatever the Composio SDK raised and keeps its message verbatim.
"""

from typing import Any, Optional

from composio_cli.errors.error_codes import ErrorCodes


class ComposioCliError(Exception):
    """
    Root of every error the CLI reports.

    Attributes:
        message: Text printed after ``Error:``
        error_code: ``CATEGORY-Name`` code; subclasses supply a default
        details: Extra context for debug logs (flag name, SDK operation)
    """

    default_error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logging."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


# --- Configuration Errors ---


class ConfigurationError(ComposioCliError):
    """
    Base class for errors in how the client is configured.

    The fix requires supplying a credential or correcting a global flag,
    not changing the command being run.
    """

    pass


class MissingCredentialError(ConfigurationError):
    """Raised when neither --api-key nor COMPOSIO_API_KEY is set."""

    default_error_code = ErrorCodes.CONFIG_MISSING_CREDENTIAL


class InvalidConfigurationError(ConfigurationError):
    """Raised when a JSON configuration flag cannot be parsed.

    Examples:
        >>> raise InvalidConfigurationError(
        ...     message="Invalid JSON for --toolkit-versions: Expecting value",
        ...     details={"flag": "--toolkit-versions"},
        ... )
    """

    default_error_code = ErrorCodes.CONFIG_INVALID_JSON


# --- Validation Errors ---


class ValidationError(ComposioCliError):
    """
    Exception raised when command flags fail cross-field validation.

    Raised by the request builders before the SDK is touched.
    """

    pass


class MissingFilterError(ValidationError):
    """Raised when `tools` is run without any discriminating filter."""

    default_error_code = ErrorCodes.INPUT_MISSING_FILTER


class ConflictingFiltersError(ValidationError):
    """Raised when mutually exclusive `tools` filters are combined."""

    default_error_code = ErrorCodes.INPUT_CONFLICTING_FILTERS


class InvalidScopeUsageError(ValidationError):
    """Raised when --scopes is used without exactly one toolkit."""

    default_error_code = ErrorCodes.INPUT_INVALID_SCOPE_USAGE


class ConflictingInputsError(ValidationError):
    """Raised when both --args and --args-file are supplied."""

    default_error_code = ErrorCodes.INPUT_CONFLICTING_INPUTS


class InvalidArgumentsError(ValidationError):
    """Raised when tool arguments are not valid JSON or cannot be read."""

    default_error_code = ErrorCodes.INPUT_INVALID_ARGUMENTS


# --- External Errors ---


class ExternalServiceError(ComposioCliError):
    """
    Raised when the Composio SDK or remote service fails.

    The message is the SDK's own message, unmodified. The original exception
    is available as ``__cause__``.

    Examples:
        >>> try:
        ...     sdk.tools.execute(slug, arguments={})
        ... except Exception as e:
        ...     raise ExternalServiceError(
        ...         message=str(e), details={"operation": "tools.execute"}
        ...     ) from e
    """

    default_error_code = ErrorCodes.EXTERNAL_CALL_FAILED

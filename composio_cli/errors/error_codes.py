"""
Central registry of error codes for composio-cli.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- CONFIG: Credential and client configuration errors
- INPUT: Command-line flag validation errors
- EXTERNAL: Failures raised by the Composio SDK or service

Usage:
    from composio_cli.errors.error_codes import ErrorCodes

    raise MissingCredentialError(
        message="Missing Composio API key...",
        error_code=ErrorCodes.CONFIG_MISSING_CREDENTIAL,
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Configuration errors
    CONFIG_MISSING_CREDENTIAL = "CONFIG-MissingCredential"
    CONFIG_INVALID_JSON = "CONFIG-InvalidJson"

    # Input validation errors
    INPUT_MISSING_FILTER = "INPUT-MissingFilter"
    INPUT_CONFLICTING_FILTERS = "INPUT-ConflictingFilters"
    INPUT_INVALID_SCOPE_USAGE = "INPUT-InvalidScopeUsage"
    INPUT_CONFLICTING_INPUTS = "INPUT-ConflictingInputs"
    INPUT_INVALID_ARGUMENTS = "INPUT-InvalidArguments"

    # External service errors
    EXTERNAL_CALL_FAILED = "EXTERNAL-CallFailed"

"""
Error handling framework for composio-cli.

This module provides the exception hierarchy shared by the client factory,
the request builders and the Composio gateway.
"""

from composio_cli.errors.error_codes import ErrorCodes
from composio_cli.errors.exceptions import (
    ComposioCliError,
    ConfigurationError,
    ConflictingFiltersError,
    ConflictingInputsError,
    ExternalServiceError,
    InvalidArgumentsError,
    InvalidConfigurationError,
    InvalidScopeUsageError,
    MissingCredentialError,
    MissingFilterError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ComposioCliError",
    # Configuration
    "ConfigurationError",
    "MissingCredentialError",
    "InvalidConfigurationError",
    # Validation
    "ValidationError",
    "MissingFilterError",
    "ConflictingFiltersError",
    "InvalidScopeUsageError",
    "ConflictingInputsError",
    "InvalidArgumentsError",
    # External
    "ExternalServiceError",
    # Codes
    "ErrorCodes",
]

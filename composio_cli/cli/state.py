"""CLI state management.

Provides a typed, immutable state object that holds the global options.
The root Typer callback builds it once and stores it in the Typer context;
each command reads it from ``ctx.obj`` and passes it on explicitly.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Attributes:
        api_key: Value of --api-key; COMPOSIO_API_KEY is the fallback.
        toolkit_versions: Unparsed JSON map given to --toolkit-versions.
        raw: If True, print compact single-line JSON.
        verbose: If True, show debug logs on stderr.
    """

    api_key: Optional[str] = None
    toolkit_versions: Optional[str] = None
    raw: bool = False
    verbose: bool = False

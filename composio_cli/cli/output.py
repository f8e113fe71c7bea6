"""CLI output helpers.

Every command's final payload goes through :func:`print_json`, which
formats it as pretty or compact JSON based on ``CLIState.raw``. Errors go
to stderr through :func:`print_error`.
"""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from composio_cli.cli.state import CLIState

# Console instance for stderr; stdout is written directly so JSON stays untouched
error_console = Console(stderr=True, emoji=False)


def format_json(data: Any, raw: bool) -> str:
    """Serialize a payload as compact (raw) or 2-space-indented JSON."""
    if raw:
        if isinstance(data, str):
            return data
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=2, ensure_ascii=False)


def print_json(data: Any, state: CLIState) -> None:
    """Write a payload to stdout.

    Raw mode emits a single line and only adds a trailing newline when
    stdout is not an interactive terminal. Pretty mode always ends with a
    newline.

    Args:
        data: JSON-compatible payload.
        state: CLI state with the raw flag.
    """
    text = format_json(data, state.raw)
    if not state.raw or not sys.stdout.isatty():
        text += "\n"
    sys.stdout.write(text)
    sys.stdout.flush()


def print_error(message: str, hint: Optional[str] = None) -> None:
    """Print ``Error: <message>`` and an optional hint line to stderr.

    Args:
        message: The error message to display.
        hint: Optional static hint printed on the following line.
    """
    error_console.print(
        f"[red bold]Error:[/red bold] {escape(message)}",
        soft_wrap=True,
        highlight=False,
    )
    if hint:
        error_console.print(escape(hint), soft_wrap=True, highlight=False)

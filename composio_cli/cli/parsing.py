"""Flag value coercion shared by the commands."""

import json
import math
from pathlib import Path
from typing import Any, Optional, Union

from composio_cli.errors import InvalidArgumentsError
from composio_cli.logging import get_logger

logger = get_logger(__name__)


def parse_csv(value: str) -> list[str]:
    """Split a comma-separated flag value, trimming items and dropping empties."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_csv_option(value: Optional[str]) -> Optional[list[str]]:
    """Like :func:`parse_csv` but maps an unset (or empty) flag to None."""
    return parse_csv(value) if value else None


def parse_json(value: str, label: str, error_cls: type[Exception] = InvalidArgumentsError) -> Any:
    """Parse a JSON flag value.

    Args:
        value: Raw JSON text.
        label: Flag name reported in the error message.
        error_cls: Exception raised on malformed JSON.

    Raises:
        error_cls: "Invalid JSON for <label>: <decoder message>"
    """
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise error_cls(
            f"Invalid JSON for {label}: {e}", details={"flag": label}
        ) from e


def read_json_file(file_path: str, label: str) -> Any:
    """Read and parse a JSON file named by a flag."""
    try:
        contents = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidArgumentsError(
            f"Unable to read {label}: {e}", details={"flag": label, "path": file_path}
        ) from e
    return parse_json(contents, label)


def parse_limit(value: Optional[str]) -> Optional[Union[int, float]]:
    """Coerce a numeric flag.

    Values that do not parse to a finite number are treated as absent
    rather than rejected.
    """
    if value is None:
        return None
    try:
        number = float(value.strip())
    except ValueError:
        logger.debug("Ignoring non-numeric limit %r", value)
        return None
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite limit %r", value)
        return None
    return int(number) if number.is_integer() else number

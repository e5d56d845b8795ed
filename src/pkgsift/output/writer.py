"""JSON writer — Pretty-prints search results to stdout or a file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Base exception for output errors."""


class OutputWriteError(OutputError):
    """Raised when the output file cannot be created or written."""


class SerializeError(OutputError):
    """Raised when a value cannot be encoded as JSON."""


def dumps_pretty(value: Any) -> str:
    """Encode *value* as indented JSON, keeping non-ASCII characters.

    Raises:
        SerializeError: If *value* is not JSON-serializable.
    """
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializeError(f"Cannot serialize value to JSON: {e}") from e


def write_json_to_file(value: Any, path: str | Path) -> Path:
    """Write *value* as pretty-printed JSON to *path*, replacing any existing file.

    The document is fully serialized before the file is opened, so a
    serialization failure never truncates an existing file.

    Args:
        value: Any JSON-serializable value.
        path: Destination file path.

    Returns:
        The path written to.

    Raises:
        SerializeError: If *value* is not JSON-serializable.
        OutputWriteError: If the file cannot be created or written.
    """
    text = dumps_pretty(value)
    out_path = Path(path)
    try:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {out_path}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(text), out_path)
    return out_path

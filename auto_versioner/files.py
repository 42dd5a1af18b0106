"""JSON reading and writing utilities.

Documents are written back with 2-space indentation and their original key
order, so a version bump shows up as a one-line diff. No trailing newline is
added.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import FileError


def read_json_file(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileError: If the file cannot be read or is not valid JSON.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError) as exc:
        raise FileError(f"Error reading JSON file at {path}: {exc}", path) from exc


def write_json_file(path: str | Path, data: Any) -> None:
    """Serialize data to a JSON file.

    Raises:
        FileError: If the data cannot be serialized or the file written.
    """
    try:
        text = json.dumps(data, indent=2, ensure_ascii=False)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except (OSError, TypeError, ValueError) as exc:
        raise FileError(f"Error writing JSON file at {path}: {exc}", path) from exc

"""Per-file version updates.

Each mutator applies one change to one file and reports success as a
boolean. Failures are printed and swallowed here: a broken file must not
stop its siblings in the same project group from being updated.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import FileError
from .files import read_json_file, write_json_file
from .models import FileTarget
from .shell import warn


def resolve_path(base_dir: str | Path | None, path: str | Path) -> Path:
    """Resolve a target path against a project's base directory."""
    if not base_dir:
        return Path(path)
    return Path(base_dir) / path


def update_json_version(path: str | Path, field: str, new_version: str) -> bool:
    """Set a top-level field of a JSON object file to new_version."""
    print(f"  Updating JSON file {path}, field {field} to {new_version}")
    try:
        doc = read_json_file(path)
        if not isinstance(doc, dict):
            raise FileError(f"Expected a JSON object in {path}", path)
        doc[field] = new_version
        write_json_file(path, doc)
    except FileError as exc:
        warn(f"Failed to update version in {path}: {exc}")
        return False
    return True


def update_env_version(path: str | Path, key: str, new_version: str) -> bool:
    """Rewrite (or append) the ``KEY=VALUE`` line for key in an env file.

    Only the first matching line is rewritten. When the key is missing, the
    line is appended after normalizing the file to end with a single newline.
    Line endings of untouched lines are preserved, and an appended line uses
    CRLF when the file already does.
    """
    print(f"  Updating ENV file {path}, key {key} to {new_version}")
    line = f"{key}={new_version}"
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            content = fh.read()

        pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)
        # Callable replacement so backslashes in the value stay literal
        updated, count = pattern.subn(lambda _: line, content, count=1)
        if not count:
            newline = "\r\n" if "\r\n" in content else "\n"
            body = content.rstrip("\r\n")
            updated = f"{body}{newline}{line}{newline}" if body else f"{line}{newline}"

        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(updated)
    except (OSError, UnicodeError) as exc:
        warn(f"Failed to update version in {path}: {exc}")
        return False
    return True


def apply_version(
    target: FileTarget, new_version: str, base_dir: str | Path | None = None
) -> bool:
    """Write new_version into a single file target.

    Args:
        target: The file to update.
        new_version: Version string to write.
        base_dir: Directory the target path is relative to, if any.

    Returns:
        True if the file was updated (or intentionally skipped), False if
        the update failed.
    """
    path = resolve_path(base_dir, target.path)
    if target.kind == "json":
        return update_json_version(path, target.json_field, new_version)
    if not target.key:
        print(f"  Skipping ENV file {path}: no key configured")
        return True
    return update_env_version(path, target.key, new_version)

"""Version bump pipeline: resolve → read → calculate → apply.

This module orchestrates a version bump across the main project and its
subprojects:
1. Resolve which project groups to update
2. Read each group's current version from its version source
3. Calculate the next version
4. Write it into every file target of the group

Groups are processed one after another, main first. A fatal error (bad
version source, malformed version) aborts the run; groups already processed
keep their changes. Individual file failures only produce warnings.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .errors import FileError, InvalidBumpKind, MissingVersionField
from .files import read_json_file, write_json_file
from .models import DEFAULT_JSON_FIELD, ProjectConfig, VersionUpdates
from .projects import resolve_groups
from .shell import step, warn
from .targets import apply_version, resolve_path, update_env_version
from .versions import BUMP_KINDS, calculate_new_version, parse_version

DEFAULT_PACKAGE_PATH = "package.json"


def get_current_version(path: str | Path, field: str = DEFAULT_JSON_FIELD) -> str:
    """Read the current version string from a JSON version source.

    Raises:
        MissingVersionField: If the file cannot be read, is not a JSON
            object, or has no non-empty string under field.
    """
    print(f"  Reading version from: {path}")
    try:
        doc = read_json_file(path)
    except FileError as exc:
        raise MissingVersionField(path, field, str(exc)) from exc

    version = doc.get(field) if isinstance(doc, dict) else None
    if not isinstance(version, str) or not version.strip():
        raise MissingVersionField(path, field)
    print(f"  Current version found: {version}")
    return version


def update_all_versions(
    bump_kind: str,
    config: ProjectConfig,
    requested_ids: Sequence[str] | None = None,
) -> VersionUpdates:
    """Bump every selected project group and propagate the new versions.

    Args:
        bump_kind: "major", "minor" or "patch".
        config: Validated configuration.
        requested_ids: Project ids to update. Defaults to all projects.

    Returns:
        Map of project id to its new version, for every group that was
        processed. Skipped groups have no entry.

    Raises:
        InvalidBumpKind: Before any file is read.
        MissingVersionField: If a group's version source is unusable.
        InvalidVersionFormat: If a group's current version is malformed.
    """
    if bump_kind not in BUMP_KINDS:
        raise InvalidBumpKind(bump_kind)

    groups = resolve_groups(config, requested_ids)
    step(
        "Updating versions for projects: "
        + (", ".join(g.id for g in groups) or "<none>")
    )

    updates: VersionUpdates = {}
    for group in groups:
        source_path = resolve_path(group.base_dir, group.source.path)
        current = get_current_version(source_path, group.source.json_field)
        new_version = calculate_new_version(current, bump_kind)
        print(f"  {group.id}: {current} → {new_version}")

        failed = [
            target.path
            for target in group.files
            if not apply_version(target, new_version, group.base_dir)
        ]
        if failed:
            warn(f"{group.id}: {len(failed)} file(s) not updated: {', '.join(failed)}")

        updates[group.id] = new_version
        print(f"  Updated {group.id} project version to {new_version}")

    return updates


def update_package_version(
    bump_kind: str,
    package_path: str | Path = DEFAULT_PACKAGE_PATH,
    custom_version: str | None = None,
) -> str:
    """Bump (or explicitly set) the version of a single package.json.

    Used when no file targets are configured at all.

    Args:
        bump_kind: "major", "minor" or "patch". Ignored when custom_version
            is given.
        package_path: Path to the package.json file.
        custom_version: Exact version to write instead of bumping.

    Returns:
        The version written to the file.

    Raises:
        MissingVersionField: If the file has no usable version to bump.
        InvalidVersionFormat: If the current or custom version is malformed.
        InvalidBumpKind: If bump_kind is invalid and no custom_version is set.
        FileError: If the file cannot be read or written.
    """
    if custom_version is not None:
        parse_version(custom_version)
        new_version = custom_version.strip()
    else:
        current = get_current_version(package_path)
        new_version = calculate_new_version(current, bump_kind)

    doc = read_json_file(package_path)
    if not isinstance(doc, dict):
        raise FileError(f"Expected a JSON object in {package_path}", package_path)
    print(f"  Updating version {doc.get('version')} → {new_version} in {package_path}")
    doc["version"] = new_version
    write_json_file(package_path, doc)
    return new_version


def update_env(new_version: str, env_path: str | Path, key: str) -> bool:
    """Write new_version under key in an env file. Soft-fails like the mutators."""
    return update_env_version(env_path, key, new_version)

"""Project selection.

Turns a configuration and an optional list of requested project ids into the
concrete list of groups to bump. Selection is always fully materialized here,
before any file is touched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import FileTarget, ProjectConfig, ProjectGroup
from .shell import warn

MAIN_PROJECT = "main"
SOURCE_FILENAME = "package.json"


def find_version_source(files: Iterable[FileTarget]) -> FileTarget | None:
    """Return the first JSON target whose path ends with package.json."""
    for target in files:
        if target.kind == "json" and target.path.endswith(SOURCE_FILENAME):
            return target
    return None


def available_projects(config: ProjectConfig) -> list[str]:
    """List every project id declared in the config, main first."""
    return [MAIN_PROJECT, *(sub.dir for sub in config.subprojects)]


def resolve_groups(
    config: ProjectConfig, requested_ids: Sequence[str] | None = None
) -> list[ProjectGroup]:
    """Determine which project groups to bump, in declaration order.

    A group is included when it was requested and it has a version source.
    The main project without one is skipped silently; a subproject without
    one is skipped with a warning.

    Args:
        config: Validated configuration.
        requested_ids: Project ids to update. Defaults to all projects.
            Their order does not affect the result order.

    Returns:
        Groups with main first, then subprojects in config order.
    """
    declared = available_projects(config)
    requested = set(declared if requested_ids is None else requested_ids)

    for unknown in sorted(requested - set(declared)):
        warn(f"Unknown project requested: {unknown}")

    groups: list[ProjectGroup] = []

    if MAIN_PROJECT in requested:
        source = find_version_source(config.main_files)
        if source is not None:
            groups.append(
                ProjectGroup(id=MAIN_PROJECT, files=config.main_files, source=source)
            )

    for sub in config.subprojects:
        if sub.dir not in requested:
            continue
        source = find_version_source(sub.files)
        if source is None:
            warn(f"No package.json found for subproject: {sub.dir}")
            continue
        groups.append(
            ProjectGroup(id=sub.dir, base_dir=sub.dir, files=sub.files, source=source)
        )

    return groups

"""Commit, push and tag a finished version bump."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping

from .errors import GitError
from .shell import git, step

TAG_PREFIX = "ver-"


def _describe(exc: Exception) -> str:
    stderr = getattr(exc, "stderr", None)
    return stderr.strip() if stderr and stderr.strip() else str(exc)


def build_commit_message(updates: Mapping[str, str], message: str) -> str:
    """Append ``[id: vX.Y.Z, ...]`` to the commit message."""
    info = ", ".join(f"{project}: v{version}" for project, version in updates.items())
    return f"{message} [{info}]" if info else message


def select_tag_version(updates: Mapping[str, str]) -> str | None:
    """Pick the version to tag: main, then master, then the first entry."""
    return (
        updates.get("main")
        or updates.get("master")
        or next(iter(updates.values()), None)
    )


def create_and_push_tag(version: str) -> str:
    """Create a ``ver-<version>`` tag and push it.

    Returns:
        The tag name.

    Raises:
        GitError: If tagging or pushing fails.
    """
    tag = f"{TAG_PREFIX}{version}"
    try:
        git("tag", tag)
        git("push", "--tags")
    except (subprocess.CalledProcessError, OSError) as exc:
        raise GitError(f"Failed to create and push tag: {_describe(exc)}", "tag") from exc
    print(f"  Tag created and pushed: {tag}")
    return tag


def push_to_git(updates: Mapping[str, str], message: str) -> None:
    """Stage everything, commit with a version summary, push and tag.

    Does nothing if the working tree is clean.

    Raises:
        GitError: If any git command fails.
    """
    step("Committing version bump")
    try:
        if not git("status", "--porcelain"):
            print("  No changes to commit. Working tree clean.")
            return

        full_message = build_commit_message(updates, message)
        git("add", ".")
        print("  Staged all changes for commit")
        git("commit", "-m", full_message)
        print(f'  Commit created: "{full_message}"')
        git("push")
        print("  Changes pushed to remote repository")
    except (subprocess.CalledProcessError, OSError) as exc:
        raise GitError(f"Error pushing to Git: {_describe(exc)}", "push") from exc

    version = select_tag_version(updates)
    if version:
        create_and_push_tag(version)

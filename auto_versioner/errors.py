"""Exception hierarchy for auto-versioner.

Two tiers of failure exist. The exceptions below are fatal: they abort a
version bump and reach the CLI, which maps them to exit codes. Per-file
update problems are not exceptions at all; the mutators in
:mod:`auto_versioner.targets` report them and return ``False``.

``FileError`` is the one exception that is raised and then absorbed: the
JSON helpers raise it and the mutators turn it into a soft failure.
"""

from __future__ import annotations

from pathlib import Path


class AutoVersionerError(Exception):
    """Base class for all auto-versioner errors."""


class VersionError(AutoVersionerError):
    """A version string, bump kind or version source is unusable."""


class InvalidVersionFormat(VersionError):
    """The current version is not three dot-separated integers."""

    def __init__(self, version: object) -> None:
        super().__init__(
            f"Invalid version format: {version!r} (expected MAJOR.MINOR.PATCH)"
        )
        self.version = version


class InvalidBumpKind(VersionError):
    """The bump kind is not one of major, minor or patch."""

    def __init__(self, bump_kind: object) -> None:
        super().__init__(
            f"Invalid version type: {bump_kind!r} (expected major, minor or patch)"
        )
        self.bump_kind = bump_kind


class MissingVersionField(VersionError):
    """A version-source file has no usable version value."""

    def __init__(
        self, path: str | Path, field: str, reason: str | None = None
    ) -> None:
        message = f"No usable '{field}' value in {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = str(path)
        self.field = field


class ConfigError(AutoVersionerError):
    """The configuration file could not be read or failed validation."""

    def __init__(self, message: str, config_path: str | Path | None = None) -> None:
        super().__init__(message)
        self.config_path = str(config_path) if config_path is not None else None


class FileError(AutoVersionerError):
    """A JSON file could not be read, parsed or written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class GitError(AutoVersionerError):
    """A git command failed while committing, pushing or tagging."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation

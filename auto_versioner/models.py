"""Data models for auto-versioner.

These Pydantic models describe the configuration file and the project
groups the version bump works through. Field aliases match the camelCase
keys used in ``autoVersioner.conf.json``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FileKind = Literal["json", "env"]

# Project id → new version string, in processing order.
VersionUpdates = dict[str, str]

DEFAULT_JSON_FIELD = "version"


class FileTarget(BaseModel):
    """A single file that receives the new version.

    Attributes:
        path: File path, relative to the project's base directory.
        kind: ``"json"`` or ``"env"`` (``type`` in the config file).
        field: JSON kind only. Top-level key to overwrite; defaults to
               ``"version"``.
        key: ENV kind only. Variable name whose line is rewritten or
             appended. An env target without a key is skipped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    path: str = Field(min_length=1)
    kind: FileKind = Field(alias="type")
    field: str | None = None
    key: str | None = None

    @property
    def json_field(self) -> str:
        return self.field or DEFAULT_JSON_FIELD


class SubprojectConfig(BaseModel):
    """A subproject directory and the files versioned inside it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    dir: str = Field(min_length=1)
    files: list[FileTarget] = Field(default_factory=list)


class ProjectConfig(BaseModel):
    """Validated contents of the configuration file.

    Attributes:
        main_files: Files of the main project (``files`` in the config file).
        subprojects: Subprojects in declaration order.
        change_env: Whether the bare ``.env`` file should be updated when no
                    main files are declared. ``None`` means "ask".
        skip_git_check: Skip the commit/push/tag step entirely.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    main_files: list[FileTarget] = Field(default_factory=list, alias="files")
    subprojects: list[SubprojectConfig] = Field(default_factory=list)
    change_env: bool | None = Field(default=None, alias="changeEnv")
    skip_git_check: bool = Field(default=False, alias="skipGitCheck")

    @property
    def has_main_files(self) -> bool:
        return bool(self.main_files)


class ProjectGroup(BaseModel):
    """One independently versioned unit: the main project or a subproject.

    Attributes:
        id: ``"main"`` or the subproject directory.
        base_dir: Directory that relative file paths resolve against, or
                  ``None`` for the main project.
        files: Targets to update, in application order.
        source: The target the current version is read from.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    base_dir: str | None = None
    files: list[FileTarget]
    source: FileTarget

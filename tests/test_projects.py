"""Tests for auto_versioner.projects."""

from __future__ import annotations

import pytest

from auto_versioner.models import FileTarget, ProjectConfig
from auto_versioner.projects import available_projects, find_version_source, resolve_groups


class TestFindVersionSource:
    """Tests for find_version_source()."""

    def test_first_package_json_wins(self) -> None:
        """The first JSON target ending in package.json is the source."""
        files = [
            FileTarget(path="app.json", kind="json"),
            FileTarget(path="package.json", kind="json", field="v"),
            FileTarget(path="sub/package.json", kind="json"),
        ]
        assert find_version_source(files) is files[1]

    def test_env_target_is_never_a_source(self) -> None:
        """ENV targets are ignored even if named package.json."""
        files = [FileTarget(path="package.json", kind="env", key="VERSION")]
        assert find_version_source(files) is None

    def test_nested_path(self) -> None:
        """Nested package.json paths qualify."""
        files = [FileTarget(path="client/package.json", kind="json")]
        assert find_version_source(files) is files[0]

    def test_none_when_empty(self) -> None:
        """No targets means no source."""
        assert find_version_source([]) is None


class TestResolveGroups:
    """Tests for resolve_groups()."""

    def test_default_selects_all_in_declaration_order(
        self, workspace_config: ProjectConfig
    ) -> None:
        """Without a selection every project is included, main first."""
        groups = resolve_groups(workspace_config)

        assert [g.id for g in groups] == ["main", "web", "api"]
        assert groups[0].base_dir is None
        assert groups[1].base_dir == "web"
        assert groups[1].source.path == "package.json"

    def test_available_projects(self, workspace_config: ProjectConfig) -> None:
        """Available ids are main plus every subproject dir."""
        assert available_projects(workspace_config) == ["main", "web", "api"]

    def test_order_ignores_requested_order(
        self, workspace_config: ProjectConfig
    ) -> None:
        """Result order follows the config, not the request."""
        groups = resolve_groups(workspace_config, ["api", "main"])
        assert [g.id for g in groups] == ["main", "api"]

    def test_empty_selection(self, workspace_config: ProjectConfig) -> None:
        """An explicit empty selection selects nothing."""
        assert resolve_groups(workspace_config, []) == []

    def test_subproject_without_source_warns(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A subproject without package.json is skipped with a warning."""
        conf = ProjectConfig.model_validate(
            {
                "subprojects": [
                    {"dir": "docs", "files": [{"path": ".env", "type": "env", "key": "V"}]}
                ]
            }
        )

        assert resolve_groups(conf) == []
        assert "No package.json found for subproject: docs" in capsys.readouterr().err

    def test_main_without_source_skipped_silently(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The main project without package.json is skipped quietly."""
        conf = ProjectConfig.model_validate(
            {"files": [{"path": "app.json", "type": "json"}]}
        )

        assert resolve_groups(conf) == []
        assert capsys.readouterr().err == ""

    def test_unknown_project_warns(
        self, workspace_config: ProjectConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Requested ids missing from the config are reported."""
        groups = resolve_groups(workspace_config, ["web", "nope"])

        assert [g.id for g in groups] == ["web"]
        assert "Unknown project requested: nope" in capsys.readouterr().err

"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from auto_versioner.models import ProjectConfig


def _write_package(path: Path, version: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"name": path.parent.name, "version": version}, indent=2))


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A repo with a main project and two subprojects, used as the cwd.

    Layout:
        package.json        1.2.3
        app.json            appVersion
        .env                APP_VERSION, OTHER
        web/package.json    0.4.1
        web/.env            WEB_VERSION
        api/package.json    2.0.9
    """
    _write_package(tmp_path / "package.json", "1.2.3")
    (tmp_path / "app.json").write_text(
        json.dumps({"expo": {"name": "x"}, "appVersion": "1.2.3"})
    )
    (tmp_path / ".env").write_text("APP_VERSION=1.2.3\nOTHER=keep\n")
    _write_package(tmp_path / "web" / "package.json", "0.4.1")
    (tmp_path / "web" / ".env").write_text("WEB_VERSION=0.4.1\n")
    _write_package(tmp_path / "api" / "package.json", "2.0.9")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def workspace_config() -> ProjectConfig:
    """Configuration matching the workspace fixture."""
    return ProjectConfig.model_validate(
        {
            "files": [
                {"path": "package.json", "type": "json"},
                {"path": "app.json", "type": "json", "field": "appVersion"},
                {"path": ".env", "type": "env", "key": "APP_VERSION"},
            ],
            "subprojects": [
                {
                    "dir": "web",
                    "files": [
                        {"path": "package.json", "type": "json"},
                        {"path": ".env", "type": "env", "key": "WEB_VERSION"},
                    ],
                },
                {"dir": "api", "files": [{"path": "package.json", "type": "json"}]},
            ],
        }
    )

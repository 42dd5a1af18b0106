"""Configuration loading.

Reads ``autoVersioner.conf.json`` (or a custom path) and validates it into a
:class:`~auto_versioner.models.ProjectConfig`. A missing file is not an
error: the defaults describe a project with nothing configured.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import ProjectConfig

DEFAULT_CONFIG_PATH = "autoVersioner.conf.json"


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = "/" + "/".join(str(p) for p in err["loc"]) if err["loc"] else "/"
        parts.append(f"{loc} {err['msg']}")
    return ", ".join(parts)


def load_config(path: str | Path | None = None) -> ProjectConfig:
    """Load and validate the configuration file.

    Args:
        path: Config file path. Defaults to DEFAULT_CONFIG_PATH in the
              current directory.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not match the configuration schema.
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        print(f"No config file found at {config_path}, using defaults")
        return ProjectConfig(change_env=False)

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(
            f"Error reading config file {config_path}: {exc}", config_path
        ) from exc

    try:
        conf = ProjectConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(
            f"Config validation error: {_format_validation_error(exc)}", config_path
        ) from exc

    print(f"Loaded configuration from {config_path}")
    return conf

"""CLI entry point for auto-versioner."""

from __future__ import annotations

from pathlib import Path

import click

from .config import DEFAULT_CONFIG_PATH, load_config
from .errors import AutoVersionerError, ConfigError, VersionError
from .models import ProjectConfig, VersionUpdates
from .pipeline import (
    DEFAULT_PACKAGE_PATH,
    update_all_versions,
    update_env,
    update_package_version,
)
from .projects import MAIN_PROJECT, available_projects
from .shell import step
from .vcs import push_to_git
from .versions import BUMP_KINDS

ENV_PATH = ".env"
ENV_KEY = "VERSION"


class ConfigurationError(click.ClickException):
    """Config or version problem the user has to fix; exits with status 2."""

    exit_code = 2


def _select_projects(projects: tuple[str, ...], config: ProjectConfig) -> list[str]:
    available = available_projects(config)
    if projects:
        selected = list(projects)
    elif not config.subprojects:
        return available
    else:
        answer = click.prompt(
            f"Which projects to update? ({', '.join(available)})",
            default=",".join(available),
        )
        selected = [p.strip() for p in answer.split(",") if p.strip()]

    unknown = [p for p in selected if p not in available]
    if unknown:
        raise click.UsageError(f"Unknown project(s): {', '.join(unknown)}")
    return selected


def _bump_bare_package(bump_kind: str, config: ProjectConfig) -> VersionUpdates:
    """Bump ./package.json (and optionally .env) when nothing is configured."""
    if not Path(DEFAULT_PACKAGE_PATH).exists():
        return {}
    step(f"Updating {DEFAULT_PACKAGE_PATH}")
    new_version = update_package_version(bump_kind, DEFAULT_PACKAGE_PATH)
    if config.change_env:
        update_env(new_version, ENV_PATH, ENV_KEY)
    return {MAIN_PROJECT: new_version}


def run(
    config_path: str,
    projects: tuple[str, ...],
    bump_kind: str | None,
    message: str | None,
    update_env_flag: bool | None,
) -> VersionUpdates:
    """Collect answers, bump versions and hand the result to git."""
    config = load_config(config_path)

    if bump_kind is None:
        bump_kind = click.prompt("What type of change?", type=click.Choice(BUMP_KINDS))

    selected = _select_projects(projects, config)

    if message is None and not config.skip_git_check:
        message = click.prompt("Enter the commit message")

    if update_env_flag is not None:
        config = config.model_copy(update={"change_env": update_env_flag})
    elif config.change_env is None and not config.has_main_files:
        answer = click.confirm("Do you want to update the .env file?", default=False)
        config = config.model_copy(update={"change_env": answer})

    updates: VersionUpdates = {}
    if not config.has_main_files and not config.subprojects and MAIN_PROJECT in selected:
        updates.update(_bump_bare_package(bump_kind, config))
    updates.update(update_all_versions(bump_kind, config, selected))

    step("Summary")
    if not updates:
        click.echo("  No projects were updated.")
    for project, version in updates.items():
        click.echo(f"  {project}: {version}")

    if config.skip_git_check:
        return updates
    if not updates:
        click.echo("  Nothing to commit.")
        return updates
    push_to_git(updates, message or "")

    return updates


@click.command()
@click.version_option(package_name="auto-versioner")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the configuration file.",
)
@click.option(
    "-p",
    "--project",
    "projects",
    multiple=True,
    help="Project to update: 'main' or a subproject dir (repeatable).",
)
@click.option(
    "-t",
    "--type",
    "bump_kind",
    type=click.Choice(BUMP_KINDS),
    default=None,
    help="Version component to bump. Prompts if omitted.",
)
@click.option("-m", "--message", default=None, help="Commit message. Prompts if omitted.")
@click.option(
    "--update-env/--no-update-env",
    "update_env_flag",
    default=None,
    help="Update VERSION in ./.env when no files are configured.",
)
def cli(
    config_path: str,
    projects: tuple[str, ...],
    bump_kind: str | None,
    message: str | None,
    update_env_flag: bool | None,
) -> None:
    """Bump semantic versions across a project and its subprojects."""
    try:
        run(config_path, projects, bump_kind, message, update_env_flag)
    except ConfigError as exc:
        raise ConfigurationError(f"Configuration error: {exc}") from exc
    except VersionError as exc:
        raise ConfigurationError(f"Version error: {exc}") from exc
    except AutoVersionerError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    cli()

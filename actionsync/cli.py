"""Click-based CLI for actionsync - custom action sync for CI pipelines."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from actionsync import __version__
from actionsync.config import (
    SettingsError,
    get_commit_ref,
    load_action_config,
    load_settings,
    validate_action_config,
)
from actionsync.git import list_changed_action_folders
from actionsync.output import create_console
from actionsync.sync import ActionFolder, SyncEngine

_repo_path_option = click.option(
    "--repo-path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository checkout (default: current directory)",
)
_commit_option = click.option(
    "--commit",
    "commit_ref",
    default=None,
    help="Commit to inspect (default: $BITBUCKET_COMMIT or HEAD)",
)
_actions_dir_option = click.option(
    "--actions-dir",
    default=None,
    help="Directory holding action folders (default: actions)",
)
_color_option = click.option("--no-color", is_flag=True, help="Disable colored output")


@click.group()
@click.version_option(version=__version__, prog_name="actionsync")
def cli() -> None:
    """actionsync - create and update custom actions from CI.

    Detects action folders changed by the current commit and syncs them
    to the custom task API.

    \b
    Each folder needs:
      actions/<name>/config.yaml
      actions/<name>/main.py
    """
    pass


@cli.command()
@click.option("--api-url", default=None, help="API base URL (default: $SA_URL)")
@_commit_option
@_actions_dir_option
@_repo_path_option
@click.option("--verbose", "-v", is_flag=True, help="Show per-folder summary table")
@_color_option
def sync(
    api_url: Optional[str],
    commit_ref: Optional[str],
    actions_dir: Optional[str],
    repo_path: Optional[Path],
    verbose: bool,
    no_color: bool,
) -> None:
    """Create or update custom tasks for changed action folders.

    Requires the SA_TOKEN environment variable. Folders are processed one
    at a time; a folder that fails to sync is reported and the run
    continues. A config.yaml missing required keys stops the run with
    exit code 1.

    \b
    Environment:
        SA_TOKEN           API token (required)
        SA_URL             API base URL
        BITBUCKET_COMMIT   Commit to inspect
    """
    console = create_console(verbose=verbose, colored=not no_color)

    try:
        settings = load_settings(
            api_url=api_url,
            commit_ref=commit_ref,
            actions_dir=actions_dir,
            repo_path=repo_path,
        )
    except SettingsError as e:
        console.print_error(str(e))
        sys.exit(1)

    try:
        engine = SyncEngine(settings, console=console)
        result = engine.run()
    except Exception as e:
        console.print_error(f"Fatal error: {e}")
        sys.exit(1)

    console.print_sync_result(result)

    if result.exit_code != 0:
        sys.exit(result.exit_code)


@cli.command()
@_commit_option
@_actions_dir_option
@_repo_path_option
@_color_option
def validate(
    commit_ref: Optional[str],
    actions_dir: Optional[str],
    repo_path: Optional[Path],
    no_color: bool,
) -> None:
    """Check config.yaml of changed action folders without calling the API.

    Exits with code 1 if any config.yaml is not valid YAML or is missing
    required keys.

    \b
    Examples:
        actionsync validate
        actionsync validate --commit HEAD~1
    """
    console = create_console(colored=not no_color)
    repo = repo_path or Path.cwd()

    folders = list_changed_action_folders(
        commit_ref or get_commit_ref(),
        repo,
        actions_dir=actions_dir or "actions",
        console=console,
    )

    if not folders:
        console.print_info("No changed action folders")
        return

    failed = 0
    for path in folders:
        folder = ActionFolder(path, repo_path=repo)

        if not folder.has_config:
            console.print_warning(f"Skipping {folder.path}: No config.yaml found.")
            continue

        try:
            config = load_action_config(folder.config_path)
        except yaml.YAMLError as e:
            console.print_error(f"{folder.path}: Invalid YAML: {e}")
            failed += 1
            continue
        except (OSError, UnicodeDecodeError) as e:
            console.print_error(f"{folder.path}: Could not read config.yaml: {e}")
            failed += 1
            continue

        validation = validate_action_config(config, folder.path)
        if validation is not None:
            console.print_error(validation.message)
            failed += 1
            continue

        if not folder.has_script:
            console.print_warning(f"{folder.path}: config.yaml is valid but no main.py found")
        else:
            console.print_success(f"{folder.path}: config.yaml is valid")

    if failed:
        console.print_error(f"{failed} of {len(folders)} folders have invalid config.yaml")
        sys.exit(1)


def main() -> None:
    """Pipeline entry point: run sync."""
    sync(prog_name="actionsync")

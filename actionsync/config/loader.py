# actionsync Configuration Loader
# Run settings from the environment and action config.yaml loading

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from actionsync.config.schema import DEFAULT_API_URL, Settings
from actionsync.utils.token import sanitize_token

TOKEN_ENV = "SA_TOKEN"
API_URL_ENV = "SA_URL"
COMMIT_ENV = "BITBUCKET_COMMIT"

VERSION_FILE = Path(__file__).resolve().parent.parent / "version.txt"


class SettingsError(Exception):
    """Raised when required run settings are missing."""


def get_version(version_path: Optional[Path] = None) -> str:
    """
    Read the bundled version marker.

    Args:
        version_path: Optional override of the version file location.

    Returns:
        Version string, or "unknown" if the file can't be read.
    """
    path = version_path or VERSION_FILE
    try:
        version = path.read_text(encoding="utf-8").strip()
    except OSError:
        return "unknown"
    return version or "unknown"


def get_commit_ref(environ: Optional[Mapping[str, str]] = None) -> str:
    """Commit reference from the environment, defaulting to HEAD."""
    if environ is None:
        environ = os.environ
    return environ.get(COMMIT_ENV) or "HEAD"


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    *,
    api_url: Optional[str] = None,
    commit_ref: Optional[str] = None,
    actions_dir: Optional[str] = None,
    repo_path: Optional[Path] = None,
) -> Settings:
    """
    Build run settings from environment variables.

    Explicit arguments take priority over the environment.

    Args:
        environ: Environment mapping (defaults to os.environ).
        api_url: Override for the API base URL.
        commit_ref: Override for the commit reference.
        actions_dir: Override for the actions directory.
        repo_path: Override for the repository path.

    Returns:
        Settings: Validated settings.

    Raises:
        SettingsError: If the API token is not set.
    """
    if environ is None:
        environ = os.environ

    token = sanitize_token(environ.get(TOKEN_ENV))
    if not token:
        raise SettingsError(f"Please check environment variables.\nEnsure {TOKEN_ENV} is defined.")

    data: dict[str, Any] = {
        "token": token,
        "api_url": api_url or environ.get(API_URL_ENV) or DEFAULT_API_URL,
        "commit_ref": commit_ref or get_commit_ref(environ),
        "version": get_version(),
    }
    if actions_dir:
        data["actions_dir"] = actions_dir
    if repo_path is not None:
        data["repo_path"] = repo_path

    return Settings.model_validate(data)


def load_action_config(config_path: Path) -> Any:
    """
    Load an action's config.yaml.

    Args:
        config_path: Path to the YAML document.

    Returns:
        Parsed document; an empty document yields an empty dict.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the document is not valid YAML.
    """
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    return data

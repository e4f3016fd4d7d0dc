# actionsync Payload Builder
# Request bodies for creating and updating custom tasks

from typing import Any

import yaml

from actionsync.config.loader import load_action_config
from actionsync.config.schema import CONFIG_FILE, SCRIPT_FILE
from actionsync.config.validator import ConfigValidationError, validate_action_config
from actionsync.sync.item import ActionFolder
from actionsync.utils.encoding import encode_script


class PayloadError(Exception):
    """Base class for payload building errors."""

    # Fatal errors abort the whole run instead of skipping the folder
    fatal = False

    def __init__(self, folder: str, message: str):
        self.folder = folder
        self.message = message
        super().__init__(message)


class ConfigMissingError(PayloadError):
    """Folder has no config.yaml."""

    def __init__(self, folder: str):
        super().__init__(folder, "No config.yaml found")


class ScriptMissingError(PayloadError):
    """Folder has no main.py."""

    def __init__(self, folder: str):
        super().__init__(folder, "No main.py file found")


class InvalidYamlError(PayloadError):
    """config.yaml could not be parsed."""

    def __init__(self, folder: str, detail: str):
        self.detail = detail
        super().__init__(folder, f"Invalid YAML: {detail}")


class UnreadableFileError(PayloadError):
    """config.yaml or main.py could not be read as UTF-8 text."""

    def __init__(self, folder: str, file_name: str, detail: str):
        self.file_name = file_name
        self.detail = detail
        super().__init__(folder, f"Could not read {file_name}: {detail}")


class InvalidConfigError(PayloadError):
    """config.yaml is missing required keys."""

    fatal = True

    def __init__(self, validation: ConfigValidationError):
        self.validation = validation
        super().__init__(validation.folder, validation.message)

    @property
    def missing_keys(self) -> list[str]:
        return self.validation.missing_keys


def _read_encoded_script(folder: ActionFolder) -> str:
    if not folder.has_script:
        raise ScriptMissingError(folder.path)
    try:
        text = folder.script_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(folder.path, SCRIPT_FILE, str(e)) from e
    return encode_script(text)


def build_full_payload(folder: ActionFolder) -> dict[str, Any]:
    """
    Build the complete task payload for a folder.

    Args:
        folder: Action folder to read.

    Returns:
        Payload with name, metadata, the full config and the encoded script.

    Raises:
        ConfigMissingError: If config.yaml doesn't exist.
        InvalidYamlError: If config.yaml is not valid YAML.
        InvalidConfigError: If required keys are missing.
        ScriptMissingError: If main.py doesn't exist.
        UnreadableFileError: If a file is not readable UTF-8 text.
    """
    if not folder.has_config:
        raise ConfigMissingError(folder.path)

    try:
        config = load_action_config(folder.config_path)
    except yaml.YAMLError as e:
        raise InvalidYamlError(folder.path, str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(folder.path, CONFIG_FILE, str(e)) from e

    validation = validate_action_config(config, folder.path)
    if validation is not None:
        raise InvalidConfigError(validation)

    encoded = _read_encoded_script(folder)

    return {
        "name": folder.name,
        "description": config["description"],
        "memory": config["memory"],
        "time_limit": config["time_limit"],
        "concurrency": config["concurrency"],
        "config": config,
        "file": encoded,
    }


def build_file_only_payload(folder: ActionFolder) -> dict[str, Any]:
    """
    Build an update payload carrying only the script.

    Raises:
        ScriptMissingError: If main.py doesn't exist.
        UnreadableFileError: If main.py is not readable UTF-8 text.
    """
    return {"file": _read_encoded_script(folder)}

# actionsync Config Validator
# Required-key checks for action config.yaml

from dataclasses import dataclass, field
from typing import Any, Optional

from actionsync.config.schema import REQUIRED_CONFIG_KEYS


@dataclass
class ConfigValidationError:
    """Missing required keys in one action's config.yaml."""

    folder: str
    missing_keys: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        lines = "\n  - ".join(f"'{key}' is required" for key in self.missing_keys)
        return f"Invalid config.yaml in {self.folder}:\n  - {lines}"

    def __str__(self) -> str:
        return self.message


def validate_action_config(config: Any, folder: str) -> Optional[ConfigValidationError]:
    """
    Check that every required key is present.

    Only presence is checked; values are passed through as-is. A document
    that is not a mapping is missing every key.

    Args:
        config: Parsed config.yaml document.
        folder: Folder the document came from, for the error message.

    Returns:
        ConfigValidationError listing all missing keys, or None if valid.
    """
    present = config if isinstance(config, dict) else {}
    missing = [key for key in REQUIRED_CONFIG_KEYS if key not in present]

    if missing:
        return ConfigValidationError(folder=folder, missing_keys=missing)
    return None

# actionsync Configuration Module
# Run settings, action config.yaml loading and validation

from actionsync.config.loader import (
    SettingsError,
    get_commit_ref,
    get_version,
    load_action_config,
    load_settings,
)
from actionsync.config.schema import (
    ALLOWED_INTERPRETERS,
    ALLOWED_MEMORY,
    CONCURRENCY_RANGE,
    CONFIG_FILE,
    REQUIRED_CONFIG_KEYS,
    SCRIPT_FILE,
    TIME_LIMIT_RANGE,
    TIME_LIMIT_STEP,
    Settings,
)
from actionsync.config.validator import ConfigValidationError, validate_action_config

__all__ = [
    # Schema
    "Settings",
    "CONFIG_FILE",
    "SCRIPT_FILE",
    "REQUIRED_CONFIG_KEYS",
    "ALLOWED_MEMORY",
    "ALLOWED_INTERPRETERS",
    "TIME_LIMIT_RANGE",
    "TIME_LIMIT_STEP",
    "CONCURRENCY_RANGE",
    # Loader
    "SettingsError",
    "get_commit_ref",
    "get_version",
    "load_settings",
    "load_action_config",
    # Validator
    "ConfigValidationError",
    "validate_action_config",
]

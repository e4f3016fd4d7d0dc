# actionsync Sync Module
# Payload building and the per-folder sync engine

from actionsync.sync.actions import FolderResult, FolderState, should_send_file_only
from actionsync.sync.engine import SyncEngine, SyncResult
from actionsync.sync.item import ActionFolder
from actionsync.sync.payload import (
    ConfigMissingError,
    InvalidConfigError,
    InvalidYamlError,
    PayloadError,
    ScriptMissingError,
    UnreadableFileError,
    build_file_only_payload,
    build_full_payload,
)

__all__ = [
    # Item
    "ActionFolder",
    # Payload
    "PayloadError",
    "ConfigMissingError",
    "ScriptMissingError",
    "InvalidYamlError",
    "InvalidConfigError",
    "UnreadableFileError",
    "build_full_payload",
    "build_file_only_payload",
    # Actions
    "FolderState",
    "FolderResult",
    "should_send_file_only",
    # Engine
    "SyncEngine",
    "SyncResult",
]

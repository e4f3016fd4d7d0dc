# actionsync Sync Actions
# Per-folder outcome states and the full vs. file-only update decision

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from actionsync.config.schema import CONFIG_FILE, SCRIPT_FILE


class FolderState(str, Enum):
    """Terminal state of one folder in a run."""

    # Skipped, run continues
    SKIPPED_NO_CONFIG = "skipped_no_config"
    SKIPPED_NO_SCRIPT = "skipped_no_script"

    # Missing required config keys, run aborts
    VALIDATION_FAILED = "validation_failed"

    # Remote task written
    CREATED = "created"
    UPDATED = "updated"

    # Folder failed, run continues
    SYNC_ERROR = "sync_error"


@dataclass
class FolderResult:
    """Outcome of syncing one action folder."""

    folder: str
    state: FolderState
    task_id: Optional[Any] = None
    partial: bool = False
    error: Optional[str] = None

    @property
    def is_skipped(self) -> bool:
        return self.state in (FolderState.SKIPPED_NO_CONFIG, FolderState.SKIPPED_NO_SCRIPT)

    @property
    def is_synced(self) -> bool:
        """Check if the remote task was created or updated."""
        return self.state in (FolderState.CREATED, FolderState.UPDATED)

    @property
    def is_fatal(self) -> bool:
        return self.state == FolderState.VALIDATION_FAILED


def should_send_file_only(changed_files: list[str]) -> bool:
    """
    Decide whether an update can carry only the script.

    True when the commit touched the folder's main.py and nothing else in
    it. An empty change list means the config can't be assumed unchanged.

    Args:
        changed_files: Paths changed by the commit, relative to the folder.

    Returns:
        True if the file-only payload should be sent.
    """
    if not changed_files:
        return False
    if CONFIG_FILE in changed_files:
        return False
    return all(file == SCRIPT_FILE for file in changed_files)

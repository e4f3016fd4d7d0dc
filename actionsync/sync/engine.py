# actionsync Sync Engine
# Sequential create/update of remote tasks for changed action folders

from dataclasses import dataclass, field
from typing import Any, Optional

from actionsync.client import ActionsClient, RequestFailedError
from actionsync.config.schema import Settings
from actionsync.git.operations import list_changed_action_folders, list_changed_files_in
from actionsync.output.console import Console
from actionsync.sync.actions import FolderResult, FolderState, should_send_file_only
from actionsync.sync.item import ActionFolder
from actionsync.sync.payload import (
    InvalidConfigError,
    PayloadError,
    build_file_only_payload,
    build_full_payload,
)


@dataclass
class SyncResult:
    """Result of a complete pipeline run."""

    folders: list[str] = field(default_factory=list)
    results: list[FolderResult] = field(default_factory=list)
    aborted: bool = False

    def _count(self, *states: FolderState) -> int:
        return sum(1 for r in self.results if r.state in states)

    @property
    def created(self) -> int:
        return self._count(FolderState.CREATED)

    @property
    def updated(self) -> int:
        return self._count(FolderState.UPDATED)

    @property
    def skipped(self) -> int:
        return self._count(FolderState.SKIPPED_NO_CONFIG, FolderState.SKIPPED_NO_SCRIPT)

    @property
    def errors(self) -> int:
        return self._count(FolderState.SYNC_ERROR)

    @property
    def success(self) -> bool:
        """Check if every processed folder finished without errors."""
        return not self.aborted and self.errors == 0

    @property
    def exit_code(self) -> int:
        """Process exit code; per-folder sync errors don't fail the run."""
        return 1 if self.aborted else 0


class SyncEngine:
    """
    Pipeline sync engine.

    Processes changed action folders one at a time. Each folder ends in
    its own FolderState; only a config validation failure stops the run.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        client: Optional[ActionsClient] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize sync engine.

        Args:
            settings: Run settings.
            client: Optional API client (creates one from settings if not provided).
            console: Optional console for output.
        """
        self.settings = settings
        self.console = console or Console()
        self.client = client or ActionsClient(settings, console=self.console)

    def get_changed_folders(self) -> list[str]:
        """Get action folders touched by the configured commit."""
        return list_changed_action_folders(
            self.settings.commit_ref,
            self.settings.repo_path,
            actions_dir=self.settings.actions_dir,
            console=self.console,
        )

    def get_changed_files(self, folder: ActionFolder) -> list[str]:
        """Get files touched by the configured commit inside a folder."""
        return list_changed_files_in(
            folder.path,
            self.settings.commit_ref,
            self.settings.repo_path,
            console=self.console,
        )

    def run(self) -> SyncResult:
        """
        Sync every changed action folder.

        Returns:
            SyncResult with per-folder outcomes.
        """
        result = SyncResult()
        result.folders = self.get_changed_folders()

        if not result.folders:
            self.console.print_info(f"No changed folders under {self.settings.actions_dir}/")
            return result

        for path in result.folders:
            folder_result = self.sync_folder(ActionFolder(path, repo_path=self.settings.repo_path))
            result.results.append(folder_result)

            if folder_result.is_fatal:
                result.aborted = True
                break

        return result

    def sync_folder(self, folder: ActionFolder) -> FolderResult:
        """
        Sync a single action folder.

        Args:
            folder: Folder to sync.

        Returns:
            FolderResult with the folder's terminal state.
        """
        if not folder.has_config:
            self.console.print_warning(f"Skipping {folder.path}: No config.yaml found.")
            return FolderResult(folder=folder.path, state=FolderState.SKIPPED_NO_CONFIG)

        if not folder.has_script:
            self.console.print_warning(f"Skipping {folder.path}: No main.py found.")
            return FolderResult(folder=folder.path, state=FolderState.SKIPPED_NO_SCRIPT)

        self.console.print_info(f"Processing folder: {folder.path}")

        try:
            full_payload = build_full_payload(folder)
        except InvalidConfigError as e:
            self.console.print_error(f"Error processing {folder.path}: {e.message}")
            return FolderResult(folder=folder.path, state=FolderState.VALIDATION_FAILED, error=e.message)
        except PayloadError as e:
            self.console.print_error(f"Error processing {folder.path}: {e.message}")
            return FolderResult(folder=folder.path, state=FolderState.SYNC_ERROR, error=e.message)

        try:
            return self._push(folder, full_payload)
        finally:
            self.console.print_separator()

    def _push(self, folder: ActionFolder, full_payload: dict[str, Any]) -> FolderResult:
        """Create or update the remote task for a folder."""
        name = full_payload["name"]

        self.console.print_info("Checking existence")
        task_id = self.client.find_by_name(name)

        try:
            if task_id is None:
                return self._create(folder, name, full_payload)
            return self._update(folder, name, task_id, full_payload)
        except RequestFailedError as e:
            self.console.print_error(f"Error syncing task {name}: {e}")
            return FolderResult(folder=folder.path, state=FolderState.SYNC_ERROR, task_id=task_id, error=str(e))

    def _create(self, folder: ActionFolder, name: str, payload: dict[str, Any]) -> FolderResult:
        self.console.print_info(f"Creating new action: {name}")
        response = self.client.create(payload)

        if not response.ok:
            error = response.describe()
            self.console.print_error(f"Failed to create task: {error}")
            return FolderResult(folder=folder.path, state=FolderState.SYNC_ERROR, error=error)

        task_id = response.data.get("id") if isinstance(response.data, dict) else None
        self.console.print_success(f"Created successfully ({task_id})")
        return FolderResult(folder=folder.path, state=FolderState.CREATED, task_id=task_id)

    def _update(
        self,
        folder: ActionFolder,
        name: str,
        task_id: Any,
        full_payload: dict[str, Any],
    ) -> FolderResult:
        self.console.print_success(f"Existing task found (id={task_id})")

        payload = full_payload
        partial = False
        if should_send_file_only(self.get_changed_files(folder)):
            try:
                payload = build_file_only_payload(folder)
                partial = True
            except PayloadError as e:
                self.console.print_warning(f"Error generating file-only payload, using full payload: {e.message}")

        self.console.print_info(f"Updating action: {name}" + (" (main.py only)" if partial else ""))
        response = self.client.update(task_id, payload)

        if not response.ok:
            error = response.describe()
            self.console.print_error(f"Failed to update task: {error}")
            return FolderResult(
                folder=folder.path, state=FolderState.SYNC_ERROR, task_id=task_id, partial=partial, error=error
            )

        self.console.print_success("Update successful")
        return FolderResult(folder=folder.path, state=FolderState.UPDATED, task_id=task_id, partial=partial)

# Tests for actionsync.output.console

import pytest

from actionsync.output.console import Console, create_console
from actionsync.sync.actions import FolderResult, FolderState
from actionsync.sync.engine import SyncResult


@pytest.fixture
def console() -> Console:
    return Console(colored=False)


class TestMessages:
    """Tests for the print_* helpers."""

    def test_levels(self, console, capsys):
        console.print_info("checking")
        console.print_success("done")
        console.print_warning("careful")
        console.print_error("broken")
        out = capsys.readouterr().out

        assert "checking" in out
        assert "done" in out
        assert "Warning: careful" in out
        assert "Error: broken" in out

    def test_markup_in_message_printed_literally(self, console, capsys):
        console.print_error('Failed to create task: {"errors": ["[/bold] bad"]}')
        assert '["[/bold] bad"]' in capsys.readouterr().out

    def test_separator(self, console, capsys):
        console.print_separator()
        assert "-" * 34 in capsys.readouterr().out


class TestSyncResultSummary:
    """Tests for print_sync_result."""

    def test_success(self, console, capsys):
        result = SyncResult(folders=["actions/a"], results=[FolderResult("actions/a", FolderState.CREATED)])
        console.print_sync_result(result)
        out = capsys.readouterr().out

        assert "Sync completed" in out
        assert "1 created" in out

    def test_aborted(self, console, capsys):
        result = SyncResult(
            folders=["actions/a"], results=[FolderResult("actions/a", FolderState.VALIDATION_FAILED)], aborted=True
        )
        console.print_sync_result(result)
        assert "aborted" in capsys.readouterr().out

    def test_verbose_table(self, capsys):
        console = create_console(verbose=True, colored=False)
        result = SyncResult(
            folders=["actions/a", "actions/b"],
            results=[
                FolderResult("actions/a", FolderState.UPDATED, task_id=9, partial=True),
                FolderResult("actions/b", FolderState.SKIPPED_NO_SCRIPT),
            ],
        )
        console.print_sync_result(result)
        out = capsys.readouterr().out

        assert "actions/a" in out
        assert "file only" in out
        assert "skipped no script" in out

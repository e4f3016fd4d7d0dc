# actionsync Console Output
# Rich-based console output for pipeline logs

from typing import TYPE_CHECKING

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from actionsync.sync.engine import SyncResult

SEPARATOR = "-" * 34


class Console:
    """
    Console output manager using Rich.

    Every pipeline log line goes through one of the print_* methods so
    success, warning and error lines are told apart in CI logs.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(force_terminal=colored, no_color=not colored, highlight=False)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]✗ Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]⚠ Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]✓ {escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]ℹ {escape(message)}[/blue]")

    def print_separator(self) -> None:
        self._console.print(f"[dim]{SEPARATOR}[/dim]")

    def print_sync_result(self, result: "SyncResult") -> None:
        """
        Print run summary.

        Args:
            result: Sync result to display.
        """
        if self.verbose and result.results:
            self._print_folder_table(result)

        self._console.print()

        if result.aborted:
            status_text = "[red]Sync aborted: invalid config.yaml[/red]"
            border = "red"
        elif result.success:
            status_text = "[green]Sync completed[/green]"
            border = "green"
        else:
            status_text = "[yellow]Sync completed with errors[/yellow]"
            border = "yellow"

        self._console.print(
            Panel(
                f"{status_text}\n"
                f"Folders: {len(result.results)}/{len(result.folders)} processed\n"
                f"Tasks: {result.created} created, {result.updated} updated, "
                f"{result.skipped} skipped, {result.errors} errors",
                title="Summary",
                border_style=border,
            )
        )

    def _print_folder_table(self, result: "SyncResult") -> None:
        """Print one row per processed folder."""
        styles = {
            "created": "green",
            "updated": "green",
            "skipped_no_config": "dim",
            "skipped_no_script": "dim",
            "sync_error": "red",
            "validation_failed": "red",
        }

        table = Table(show_header=True, header_style="bold")
        table.add_column("Folder", style="cyan")
        table.add_column("State")
        table.add_column("Task ID", style="dim")
        table.add_column("Payload", style="dim")

        for folder_result in result.results:
            style = styles.get(folder_result.state.value, "white")
            payload = ""
            if folder_result.is_synced:
                payload = "file only" if folder_result.partial else "full"
            table.add_row(
                escape(folder_result.folder),
                f"[{style}]{folder_result.state.value.replace('_', ' ')}[/{style}]",
                "" if folder_result.task_id is None else str(folder_result.task_id),
                payload,
            )

        self._console.print()
        self._console.print(table)


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)

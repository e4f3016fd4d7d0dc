# actionsync Git Operations
# Change detection for the commit being built

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from actionsync.output.console import Console


class GitError(Exception):
    """Exception raised for git operation errors."""

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.message}: {self.stderr}"
        return self.message


def _run_git(
    *args: str,
    cwd: Optional[Path] = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command.

    Args:
        *args: Git command arguments.
        cwd: Working directory.
        check: Whether to raise on non-zero exit.

    Returns:
        CompletedProcess with result.

    Raises:
        GitError: If command fails and check is True.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise GitError("git command not found. Is git installed?")

    if check and result.returncode != 0:
        raise GitError(
            f"Git command failed: {' '.join(cmd)}",
            returncode=result.returncode,
            stderr=result.stderr.strip() if result.stderr else "",
        )
    return result


def mark_safe_directory(path: Optional[Path] = None) -> bool:
    """
    Trust the checkout directory in the global git config.

    CI containers often run as a different user than the one owning the
    clone, which makes git refuse to read history ("dubious ownership").

    Args:
        path: Directory to trust (defaults to current directory).

    Returns:
        True if the config entry was added.
    """
    directory = str((path or Path.cwd()).resolve())
    try:
        _run_git("config", "--global", "--add", "safe.directory", directory)
        return True
    except GitError:
        # Entry may already exist or the global config is read-only
        return False


def get_commit_files(commit_ref: str = "HEAD", path: Optional[Path] = None) -> list[str]:
    """
    List file paths touched by a commit.

    Merge commits are diffed against each parent (-m), so files brought in
    by the merge are included.

    Args:
        commit_ref: Commit to inspect.
        path: Repository path.

    Returns:
        Non-empty path lines in git's output order.

    Raises:
        GitError: If the history query fails.
    """
    mark_safe_directory(path)
    result = _run_git("log", "-m", "-1", "--name-only", "--pretty=format:", commit_ref, cwd=path)
    return [line for line in result.stdout.split("\n") if line.strip()]


def list_changed_action_folders(
    commit_ref: str = "HEAD",
    path: Optional[Path] = None,
    *,
    actions_dir: str = "actions",
    console: Optional["Console"] = None,
) -> list[str]:
    """
    Get action folders touched by a commit.

    Args:
        commit_ref: Commit to inspect.
        path: Repository path.
        actions_dir: Top-level directory holding action folders.
        console: Console for error output.

    Returns:
        Distinct "<actions_dir>/<child>" paths in order of first appearance,
        or an empty list if history could not be read.
    """
    root = actions_dir.rstrip("/")
    prefix = root + "/"

    try:
        files = get_commit_files(commit_ref, path)
    except GitError as e:
        if console is not None:
            console.print_error(f"Error detecting changed folders: {e}")
        return []

    folders: list[str] = []
    for file in files:
        if not file.startswith(prefix):
            continue
        parts = file.split("/")
        if len(parts) < 2 or not parts[1]:
            continue
        folder = f"{root}/{parts[1]}"
        if folder not in folders:
            folders.append(folder)

    return folders


def list_changed_files_in(
    folder: str,
    commit_ref: str = "HEAD",
    path: Optional[Path] = None,
    *,
    console: Optional["Console"] = None,
) -> list[str]:
    """
    Get files changed by a commit inside one folder.

    Args:
        folder: Folder path relative to the repository root.
        commit_ref: Commit to inspect.
        path: Repository path.
        console: Console for error output.

    Returns:
        Changed paths relative to the folder, or an empty list if history
        could not be read.
    """
    prefix = folder.rstrip("/") + "/"

    try:
        files = get_commit_files(commit_ref, path)
    except GitError as e:
        if console is not None:
            console.print_error(f"Error getting changed files in {folder}: {e}")
        return []

    return [file[len(prefix):] for file in files if file.startswith(prefix)]

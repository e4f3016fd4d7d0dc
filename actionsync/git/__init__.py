# actionsync Git Module
# Commit inspection for change detection

from actionsync.git.operations import (
    GitError,
    get_commit_files,
    list_changed_action_folders,
    list_changed_files_in,
    mark_safe_directory,
)

__all__ = [
    "GitError",
    "get_commit_files",
    "list_changed_action_folders",
    "list_changed_files_in",
    "mark_safe_directory",
]

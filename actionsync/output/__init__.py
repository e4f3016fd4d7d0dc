# actionsync Output Module
# Rich console output

from actionsync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]

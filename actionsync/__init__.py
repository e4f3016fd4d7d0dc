"""actionsync - custom action sync for CI pipelines.

Detects action folders changed by a commit and creates or updates the
matching custom tasks through the REST API.
"""

__version__ = "1.0.0"
__author__ = "Equitania Software GmbH"

__all__ = [
    "__version__",
    "ActionFolder",
    "ActionsClient",
    "Settings",
    "SyncEngine",
    "SyncResult",
    "load_settings",
    "sanitize_token",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name == "ActionsClient":
        from actionsync.client import ActionsClient

        return ActionsClient
    if name in ("Settings", "load_settings"):
        from actionsync import config

        return getattr(config, name)
    if name in ("ActionFolder", "SyncEngine", "SyncResult"):
        from actionsync import sync

        return getattr(sync, name)
    if name == "sanitize_token":
        from actionsync.utils.token import sanitize_token

        return sanitize_token
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

# actionsync Action Folder
# One deployable action discovered from change detection

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from actionsync.config.schema import CONFIG_FILE, SCRIPT_FILE


@dataclass
class ActionFolder:
    """
    An action folder under the actions directory.

    Identified by its repository-relative path; the base name is the
    remote task name.
    """

    path: str
    repo_path: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        self.path = self.path.rstrip("/")

    @property
    def name(self) -> str:
        """Remote task name."""
        return PurePosixPath(self.path).name

    @property
    def location(self) -> Path:
        """Absolute folder location on disk."""
        return self.repo_path / self.path

    @property
    def config_path(self) -> Path:
        return self.location / CONFIG_FILE

    @property
    def script_path(self) -> Path:
        return self.location / SCRIPT_FILE

    @property
    def has_config(self) -> bool:
        return self.config_path.is_file()

    @property
    def has_script(self) -> bool:
        return self.script_path.is_file()

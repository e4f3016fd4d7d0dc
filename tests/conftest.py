# actionsync Test Fixtures
# Pytest fixtures for actionsync tests

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Optional

import pytest
import yaml

from actionsync.config.schema import Settings

VALID_CONFIG = {
    "description": "Resize images",
    "memory": 512,
    "interpreter": "3.12",
    "time_limit": 600,
    "concurrency": 4,
    "requirements": ["pillow", "requests"],
}

SAMPLE_SCRIPT = 'def handler(event):\n    return "ok"\n'


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def repo(temp_dir: Path) -> Path:
    """Create a mock repository checkout with an actions directory."""
    repo = temp_dir / "repo"
    (repo / "actions").mkdir(parents=True)
    return repo


@pytest.fixture
def make_action(repo: Path) -> Callable[..., Path]:
    """Factory creating actions/<name> with optional config.yaml and main.py."""

    def _make(
        name: str,
        config: Optional[dict] = VALID_CONFIG,
        script: Optional[str] = SAMPLE_SCRIPT,
        raw_config: Optional[str] = None,
    ) -> Path:
        folder = repo / "actions" / name
        folder.mkdir(parents=True, exist_ok=True)

        if raw_config is not None:
            (folder / "config.yaml").write_text(raw_config, encoding="utf-8")
        elif config is not None:
            with open(folder / "config.yaml", "w", encoding="utf-8") as f:
                yaml.dump(config, f, default_flow_style=False, sort_keys=False)

        if script is not None:
            (folder / "main.py").write_text(script, encoding="utf-8")

        return folder

    return _make


@pytest.fixture
def settings(repo: Path) -> Settings:
    """Run settings pointing at the mock repository."""
    return Settings(
        token="abc123",
        api_url="https://api.example.com",
        commit_ref="HEAD",
        repo_path=repo,
        version="1.2.3",
    )

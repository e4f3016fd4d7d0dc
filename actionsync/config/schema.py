# actionsync Configuration Schema
# Pydantic model for run settings and constants for action config.yaml

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://zimmer.superannotate.com"
API_PATH = "/api/v1/custom_task"
REFERER = "https://app.superannotate.com/"
AUTH_TYPE = "sdk"

CONFIG_FILE = "config.yaml"
SCRIPT_FILE = "main.py"

# Keys that must be present in every config.yaml
REQUIRED_CONFIG_KEYS = (
    "description",
    "memory",
    "interpreter",
    "time_limit",
    "concurrency",
)

# Documented value sets for config.yaml. Not enforced by validation.
ALLOWED_MEMORY = (128, 256, 512, 768, 1024, 1536, 2048, 3008)
ALLOWED_INTERPRETERS = ("3.10", "3.11", "3.12", "3.13")
TIME_LIMIT_RANGE = (300, 10800)
TIME_LIMIT_STEP = 300
CONCURRENCY_RANGE = (1, 128)


class Settings(BaseModel):
    """Settings for a single pipeline run, built once at startup."""

    token: str = Field(description="Sanitized API token")
    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the API")
    commit_ref: str = Field(default="HEAD", description="Commit whose changes are synced")
    actions_dir: str = Field(default="actions", description="Top-level directory holding action folders")
    repo_path: Path = Field(default_factory=Path.cwd, description="Repository checkout path")
    version: str = Field(default="unknown", description="Tool version sent in the User-Agent")

    @field_validator("api_url", "actions_dir")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove trailing / so paths can be joined."""
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Custom task collection URL."""
        return f"{self.api_url}{API_PATH}"

    @property
    def user_agent(self) -> str:
        return f"Bitbucket Pipeline: {self.version}"

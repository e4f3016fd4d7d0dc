"""Custom task API client."""

import datetime
import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import requests

from actionsync.config.schema import AUTH_TYPE, REFERER, Settings

if TYPE_CHECKING:
    from actionsync.output.console import Console


def _json_default(value: Any) -> Any:
    """Serialize YAML dates and timestamps as ISO 8601 strings."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RequestFailedError(Exception):
    """Raised when a request to the API could not be completed."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


@dataclass
class ApiResponse:
    """Status code and decoded body of an API response."""

    status_code: int
    data: Any = None

    @property
    def ok(self) -> bool:
        """Check for a 2xx status."""
        return 200 <= self.status_code < 300

    def describe(self) -> str:
        """Body rendered for log output."""
        if isinstance(self.data, str):
            return self.data
        return json.dumps(self.data)


class ActionsClient:
    """Client for the custom task endpoint."""

    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
        console: Optional["Console"] = None,
    ):
        """Initialize client.

        Args:
            settings: Run settings with token, API URL and version
            session: Optional requests session
            console: Console for lookup error output
        """
        self.console = console
        self.endpoint = settings.endpoint
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": settings.token,
            "Auth-Type": AUTH_TYPE,
            "Referer": REFERER,
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
        }

    def _request(
        self,
        method: str,
        url: str,
        payload: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> ApiResponse:
        """Send a request and decode the body.

        Non-JSON bodies are returned as raw text.

        Raises:
            RequestFailedError: If the request could not be sent or answered
        """
        try:
            body = json.dumps(payload, default=_json_default) if payload is not None else None
        except (TypeError, ValueError) as e:
            raise RequestFailedError(method, url, f"payload is not JSON serializable: {e}") from e

        try:
            response = self.session.request(method, url, headers=self.headers, params=params, data=body)
        except requests.RequestException as e:
            raise RequestFailedError(method, url, str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = response.text

        return ApiResponse(status_code=response.status_code, data=data)

    def find_by_name(self, name: str) -> Optional[Any]:
        """Look up an existing task id by name.

        A failed lookup is reported and treated as "not found", so the
        caller goes on to create the task.

        Args:
            name: Task name

        Returns:
            Task id, or None if no task was found or the lookup failed
        """
        try:
            response = self._request("GET", self.endpoint, params={"name": name})
        except RequestFailedError as e:
            if self.console is not None:
                self.console.print_error(f"Error checking task existence: {e}")
            return None

        data = response.data
        if not isinstance(data, dict):
            return None

        results = data.get("results")
        if isinstance(results, list) and results and isinstance(results[0], dict):
            task_id = results[0].get("id")
            if task_id:
                return task_id

        return data.get("id") or None

    def create(self, payload: dict[str, Any]) -> ApiResponse:
        """Create a task from a full payload."""
        return self._request("POST", self.endpoint, payload=payload)

    def update(self, task_id: Any, payload: dict[str, Any]) -> ApiResponse:
        """Patch an existing task with a full or file-only payload."""
        return self._request("PATCH", f"{self.endpoint}/{task_id}", payload=payload)

from __future__ import annotations

import logging

import requests

from todo_client.domain.errors import ApiStatusError, ApiTransportError
from todo_client.domain.models import TaskId
from todo_client.infrastructure.api.constants import API_BASE_URL, REQUEST_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)


def _session() -> requests.Session:
    s = requests.Session()
    s.headers["Accept"] = "application/json"
    s.headers["Content-Type"] = "application/json"
    return s


class TodoApiGateway:
    """Thin wrapper over ``/api/todos/``. Every method raises ``ApiError`` on failure."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._http = session or _session()

    def list_tasks(self) -> list[dict]:
        payload = self._request("GET", self.base_url)
        if not isinstance(payload, list):
            raise ApiStatusError(200, "Unexpected task list payload")
        return payload

    def create_task(self, body: dict) -> dict:
        payload = self._request("POST", self.base_url, json=body)
        if not isinstance(payload, dict) or "id" not in payload:
            raise ApiStatusError(200, "Server did not return the created task")
        return payload

    def update_task(self, task_id: TaskId, body: dict) -> dict | None:
        payload = self._request("PUT", self._task_url(task_id), json=body)
        return payload if isinstance(payload, dict) else None

    def delete_task(self, task_id: TaskId) -> None:
        self._request("DELETE", self._task_url(task_id))

    def _task_url(self, task_id: TaskId) -> str:
        return f"{self.base_url}{task_id}/"

    def _request(self, method: str, url: str, json: dict | None = None):
        try:
            resp = self._http.request(method, url, json=json, timeout=self.timeout)
        except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as exc:
            logger.exception("%s %s failed", method, url)
            raise ApiTransportError(f"Could not reach the server: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            logger.exception("%s %s failed", method, url)
            raise ApiTransportError(str(exc)) from exc

        if resp.status_code >= 400:
            logger.error("%s %s -> HTTP %s", method, url, resp.status_code)
            raise ApiStatusError(resp.status_code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.exception("%s %s returned invalid JSON", method, url)
            raise ApiStatusError(resp.status_code, "Server returned invalid JSON") from exc

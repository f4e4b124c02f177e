import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..schemas.task import TaskRead

logger = logging.getLogger(__name__)

API_URL = "http://localhost:5000/api/tasks"  # Backend API URL


def _to_task(data: Mapping[str, Any]) -> TaskRead:
    sanitized = dict(data)
    sanitized["name"] = data.get("name") or ""
    sanitized["description"] = data.get("description") or ""
    return TaskRead.model_validate(sanitized)


class TaskApiClient:
    """Thin wrapper over the /api/tasks endpoints.

    Every method issues exactly one request. Non-2xx answers raise
    ``requests.HTTPError``; connection problems raise whatever ``requests``
    raises. Nothing is retried.
    """

    def __init__(self, base_url: str = API_URL, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, task_id: Optional[str] = None) -> str:
        if task_id is None:
            return self.base_url
        return f"{self.base_url}/{task_id}"

    def _send(self, method: str, url: str, **kwargs) -> Any:
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, **kwargs)
        response.raise_for_status()
        return response.json()

    def list_tasks(self) -> List[TaskRead]:
        return [_to_task(item) for item in self._send("GET", self._url())]

    def create_task(self, name: str, description: str = "") -> TaskRead:
        payload = {"name": name, "description": description}
        return _to_task(self._send("POST", self._url(), json=payload))

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> TaskRead:
        """PATCH any subset of ``name``, ``description`` and ``isCompleted``."""
        return _to_task(self._send("PATCH", self._url(task_id), json=fields))

    def delete_task(self, task_id: str) -> str:
        return self._send("DELETE", self._url(task_id)).get("message", "")

"""HTTP client for the remote admin service.

Usage:
    from supportdesk.admin_client import AdminClient

    client = AdminClient("http://localhost:3000", token="...")
    tasks = client.list_tasks()

Every public method returns already-decoded records and raises
:class:`AdminAPIError` when the service is unreachable or answers with a
non-2xx status. There is no retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import requests

from supportdesk.models import Customer, Representative, TaskRecord, tasks_from_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endpoints:
    """Admin API paths, relative to the service base URL."""

    create_task: str = "/api/admin/create-task"
    assign_task: str = "/api/admin/assign-task"
    tasks: str = "/api/admin/tasks"
    representatives: str = "/api/admin/representatives"
    customers: str = "/api/admin/customers"
    upload_csv: str = "/api/admin/upload-csv"


class AdminAPIError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _server_message(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return None


def _unwrap_list(body: Any, key: str = "data") -> List[Any]:
    if isinstance(body, list):
        return body
    if isinstance(body, dict) and isinstance(body.get(key), list):
        return body[key]
    return []


class AdminClient:
    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = 15.0,
        endpoints: Optional[Endpoints] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or "").strip().rstrip("/")
        self.token = token
        self.timeout = timeout
        self.endpoints = endpoints or Endpoints()
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self.base_url + path
        headers = self._headers()
        headers.update(kwargs.pop("headers", {}) or {})
        try:
            resp = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as exc:
            raise AdminAPIError(f"Timeout after {self.timeout}s") from exc
        except requests.exceptions.RequestException as exc:
            raise AdminAPIError(f"Connection failed: {exc}") from exc

        if not (200 <= resp.status_code < 300):
            message = _server_message(resp) or f"HTTP {resp.status_code}"
            logger.warning("%s %s failed: %s", method, path, message)
            raise AdminAPIError(message, status_code=resp.status_code)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise AdminAPIError(f"Invalid JSON from {path}", status_code=resp.status_code) from exc

    # -------------------- tasks --------------------
    def list_tasks(self) -> List[TaskRecord]:
        body = self._request("GET", self.endpoints.tasks)
        return tasks_from_payload(_unwrap_list(body))

    def create_task(self, task: Dict[str, Any]) -> TaskRecord:
        body = self._request("POST", self.endpoints.create_task, json=task)
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            body = body["data"]
        return TaskRecord.from_dict(body if isinstance(body, dict) else task)

    def assign_task(self, task_id: Any, member_names: Sequence[str]) -> Any:
        payload = {"taskId": task_id, "assignedMembers": [{"name": n} for n in member_names]}
        return self._request("POST", self.endpoints.assign_task, json=payload)

    def update_task(self, task: Dict[str, Any]) -> TaskRecord:
        body = self._request("PUT", f"{self.endpoints.tasks}/{task['id']}", json=task)
        return TaskRecord.from_dict(body if isinstance(body, dict) else task)

    def delete_task(self, task_id: Any) -> bool:
        self._request("DELETE", f"{self.endpoints.tasks}/{task_id}")
        return True

    # -------------------- people --------------------
    def list_representatives(self) -> List[Representative]:
        body = self._request("GET", self.endpoints.representatives)
        return [Representative.from_dict(r) for r in _unwrap_list(body) if isinstance(r, dict)]

    def list_customers(self, filename: str = "customers.csv") -> List[Customer]:
        body = self._request("GET", self.endpoints.customers, params={"filename": filename})
        return [Customer.from_dict(c) for c in _unwrap_list(body) if isinstance(c, dict)]

    def upload_csv(self, content: bytes, filename: str = "customers.csv") -> Any:
        files = {"file": (filename, content, "text/csv")}
        return self._request("POST", self.endpoints.upload_csv, files=files)

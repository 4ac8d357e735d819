"""Admin operations with user feedback.

Each call announces itself, reports success or failure through a
:class:`Notifier` and logs the outcome. Failures are re-raised so the calling
page can decide how to render them.

    backend = get_backend(get_config())
    tasks = fetch_tasks(backend, ToastNotifier())
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, TypeVar, Union

from supportdesk.admin_client import AdminAPIError, AdminClient
from supportdesk.config import DashboardConfig
from supportdesk.local_repo import LocalRepository
from supportdesk.models import Customer, Representative, TaskRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

Backend = Union[AdminClient, LocalRepository]


class Notifier(Protocol):
    def loading(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ToastNotifier:
    """Streamlit toasts. Imported lazily so services work outside the app."""

    def loading(self, message: str) -> None:
        import streamlit as st

        st.toast(message, icon="⏳")

    def success(self, message: str) -> None:
        import streamlit as st

        st.toast(message, icon="✅")

    def error(self, message: str) -> None:
        import streamlit as st

        st.toast(message, icon="❌")


class SilentNotifier:
    def loading(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


def get_backend(config: DashboardConfig) -> Backend:
    if config.use_remote_api:
        logger.info("Using remote admin API at %s", config.api_base_url)
        return AdminClient(config.api_base_url or "", token=config.api_token, timeout=config.api_timeout)
    logger.info("Using local admin backend (%s)", config.database_url.split("://", 1)[0])
    return LocalRepository(config.database_url)


def _call(
    notifier: Optional[Notifier],
    action: str,
    done: str,
    failed: str,
    fn: Callable[[], T],
) -> T:
    notifier = notifier or SilentNotifier()
    notifier.loading(action)
    try:
        result = fn()
    except AdminAPIError as exc:
        notifier.error(exc.message or failed)
        logger.error("%s: %s", failed, exc)
        raise
    except Exception as exc:
        notifier.error(failed)
        logger.exception("%s", failed)
        raise AdminAPIError(f"{failed}: {exc}") from exc
    notifier.success(done)
    logger.info("%s", done)
    return result


def fetch_tasks(backend: Backend, notifier: Optional[Notifier] = None) -> List[TaskRecord]:
    return _call(notifier, "Fetching tasks...", "Tasks fetched successfully!",
                 "Error fetching tasks", backend.list_tasks)


def create_task(backend: Backend, task: Dict[str, Any], notifier: Optional[Notifier] = None) -> TaskRecord:
    return _call(notifier, "Creating task...", "Task created successfully!",
                 "Error creating task", lambda: backend.create_task(task))


def update_task(backend: Backend, task: Dict[str, Any], notifier: Optional[Notifier] = None) -> Optional[TaskRecord]:
    return _call(notifier, "Updating task...", "Task updated successfully!",
                 "Error updating task", lambda: backend.update_task(task))


def assign_task(
    backend: Backend, task_id: Any, member_names: Sequence[str], notifier: Optional[Notifier] = None
) -> Any:
    return _call(notifier, "Assigning task...", "Task assigned successfully!",
                 "Error assigning task", lambda: backend.assign_task(task_id, member_names))


def delete_task(backend: Backend, task_id: Any, notifier: Optional[Notifier] = None) -> bool:
    return _call(notifier, "Deleting task...", "Task deleted successfully!",
                 "Error deleting task", lambda: backend.delete_task(task_id))


def fetch_representatives(backend: Backend, notifier: Optional[Notifier] = None) -> List[Representative]:
    return _call(notifier, "Fetching representatives...", "Representatives fetched successfully!",
                 "Error fetching representatives", backend.list_representatives)


def add_representative(
    backend: Backend, rep: Dict[str, Any], notifier: Optional[Notifier] = None
) -> Representative:
    """Persist where the backend supports it; the remote API has no endpoint."""
    if isinstance(backend, LocalRepository):
        return _call(notifier, "Saving representative...", "Representative added!",
                     "Error adding representative", lambda: backend.add_representative(rep))
    return Representative.from_dict(rep)


def fetch_customers(
    backend: Backend, filename: str = "customers.csv", notifier: Optional[Notifier] = None
) -> List[Customer]:
    return _call(notifier, "Fetching customers...", "Customers fetched successfully!",
                 "Error fetching customers", lambda: backend.list_customers(filename))


def upload_csv(
    backend: Backend, content: bytes, filename: str = "customers.csv", notifier: Optional[Notifier] = None
) -> Any:
    return _call(notifier, "Uploading CSV...", "CSV uploaded successfully!",
                 "Error uploading CSV", lambda: backend.upload_csv(content, filename))

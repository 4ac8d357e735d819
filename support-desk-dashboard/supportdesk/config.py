"""Dashboard runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() if strip else value


def env_optional_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() or default


def env_int(name: str, default: int, *, minimum: Optional[int] = None) -> int:
    raw = os.environ.get(name)
    try:
        value = int(raw.strip()) if raw is not None else int(default)
    except ValueError:
        value = int(default)
    if minimum is not None:
        value = max(minimum, value)
    return value


def _app_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _default_database_url() -> str:
    data_dir = _app_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{(data_dir / 'dashboard.db').as_posix()}"


@dataclass(frozen=True)
class DashboardConfig:
    """Runtime configuration for the dashboard.

    Remote admin API:
    - ADMIN_API_BASE_URL: base URL of the admin service. When unset the
      dashboard runs against the local SQLAlchemy backend instead.
    - ADMIN_API_TOKEN: bearer token sent with every request (optional)
    - ADMIN_API_TIMEOUT: request timeout in seconds (default: 15)

    Local backend:
    - DASHBOARD_DATABASE_URL: backend-specific DB URL (preferred)
    - DATABASE_URL: shared DB URL
    - If neither is set, defaults to SQLite at data/dashboard.db

    Task table:
    - TASK_TABLE_PAGE_SIZE: rows per page (default: 10, minimum 1)

    Logging:
    - DASHBOARD_LOG_LEVEL: root level for the supportdesk loggers (default: INFO)
    """

    api_base_url: Optional[str]
    api_token: Optional[str]
    api_timeout: int

    database_url: str
    page_size: int
    log_level: str

    @property
    def use_remote_api(self) -> bool:
        return bool(self.api_base_url)

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        base_url = env_optional_str("ADMIN_API_BASE_URL")
        if base_url:
            base_url = base_url.rstrip("/")

        database_url = (
            env_optional_str("DASHBOARD_DATABASE_URL")
            or env_optional_str("DATABASE_URL")
            or _default_database_url()
        )

        return cls(
            api_base_url=base_url,
            api_token=env_optional_str("ADMIN_API_TOKEN"),
            api_timeout=env_int("ADMIN_API_TIMEOUT", 15, minimum=1),
            database_url=database_url,
            page_size=env_int("TASK_TABLE_PAGE_SIZE", 10, minimum=1),
            log_level=env_str("DASHBOARD_LOG_LEVEL", "INFO").upper(),
        )


_config: Optional[DashboardConfig] = None


def get_config() -> DashboardConfig:
    """Get the dashboard configuration (cached)."""
    global _config
    if _config is None:
        _config = DashboardConfig.from_env()
    return _config


def reset_config() -> None:
    global _config
    _config = None

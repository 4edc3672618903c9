"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import logging
import os
import sys


HOME_ENV_VAR = "ACADEMIC_PLANNER_HOME"


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``.

    ``ACADEMIC_PLANNER_HOME`` in the environment wins over the platform default.
    """

    environ = dict(os.environ if env is None else env)
    override = environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()

    platform_id = (platform or sys.platform).lower()
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return base.expanduser() / sanitized


APP_NAME = "AcademicPlanner"


DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"
DB_PATH = DATA_DIR / "planner.db"


@dataclass(frozen=True)
class StorageSettings:
    courses_key: str = "courses"
    tasks_key: str = "tasks"
    settings_key: str = "settings"
    default_course_color: str = "#4F46E5"
    echo_sql: bool = False


STORAGE = StorageSettings()


@dataclass(frozen=True)
class LoggingSettings:
    path: Path = LOG_DIR / "planner.log"
    level: int = logging.INFO
    max_bytes: int = 1_000_000
    backup_count: int = 3
    fmt: str = "%(asctime)s [%(levelname)s] %(message)s"
    capture_warnings: bool = True


LOGGING = LoggingSettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "DB_PATH",
    "HOME_ENV_VAR",
    "LOG_DIR",
    "LOGGING",
    "STORAGE",
    "LoggingSettings",
    "StorageSettings",
    "get_default_data_dir",
]

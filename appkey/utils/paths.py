"""Utility helpers for runtime paths.

The data directory is where ``config.json`` lives. It follows the usual
per-user location of each platform and can be overridden with
``APPKEY_DATA_DIR``; when none of the candidates is writable a directory
under the system temp dir is used so the application can still start.
"""

from __future__ import annotations

import os
import platform
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from .. import settings

_APP_DATA_ENV = "APPKEY_DATA_DIR"
_APP_LOG_ENV = "APPKEY_LOG_DIR"


def _can_write(path: Path) -> bool:
    """Return ``True`` if ``path`` can be created and written to."""

    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / f".__permcheck_{os.getpid()}"
        probe.write_text("ok", encoding="utf-8")
        probe.unlink(missing_ok=True)
        return True
    except OSError:
        return False


def _platform_data_home(app_name: str) -> Iterable[Path]:
    """Yield platform-specific user data directories."""

    home = Path.home()
    system = platform.system()
    if system == "Darwin":
        yield home / "Library" / "Application Support" / app_name
    elif system == "Windows":
        base = Path(os.environ.get("APPDATA") or (home / "AppData" / "Roaming"))
        yield base / app_name
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or (home / ".config"))
        yield base / app_name


def get_data_dir(app_name: Optional[str] = None) -> Path:
    """Return a writable directory for the application's private files."""

    name = app_name or settings.APP_NAME
    env_dir = os.environ.get(_APP_DATA_ENV)
    if env_dir:
        candidate = Path(env_dir).expanduser()
        if _can_write(candidate):
            return candidate
    for candidate in _platform_data_home(name):
        if _can_write(candidate):
            return candidate
    fallback = Path(tempfile.gettempdir()) / name
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


def get_log_dir(data_dir: Optional[Path] = None) -> Path:
    """Return the directory where log files should be written."""

    env_dir = os.environ.get(_APP_LOG_ENV)
    if env_dir:
        candidate = Path(env_dir).expanduser()
        if _can_write(candidate):
            return candidate
    log_dir = (data_dir or get_data_dir()) / "logs"
    if _can_write(log_dir):
        return log_dir
    fallback = Path(tempfile.gettempdir()) / settings.APP_NAME / "logs"
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback

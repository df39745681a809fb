"""Static application settings for runtime behavior.

These rely on environment variables for overrides so the launcher can be
tuned without touching the persistent ``config.json``.
"""

from __future__ import annotations

import os


def _get_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value in {"1", "true", "yes", "on", "y"}


def _get_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except Exception:
        try:
            return int(float(value))
        except Exception:
            return default


def _get_str(name: str, default: str) -> str:
    value = (os.environ.get(name) or "").strip()
    return value or default


APP_NAME: str = _get_str("APPKEY_APP_NAME", "appkey")
HOST: str = _get_str("APPKEY_HOST", "127.0.0.1")
PORT: int = _get_int("APPKEY_PORT", 8765)
EPHEMERAL_ON_ERROR: bool = _get_bool("APPKEY_EPHEMERAL_ON_ERROR", False)


__all__ = ["APP_NAME", "HOST", "PORT", "EPHEMERAL_ON_ERROR"]

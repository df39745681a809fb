from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import uuid4

_SESSION_ID = uuid4().hex
_ADAPTER: Optional[logging.LoggerAdapter] = None
_HANDLERS: List[logging.Handler] = []

MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5


class _JsonLineFormatter(logging.Formatter):
    """Formatter that serialises log records as JSON lines."""

    _RESERVED = set(
        logging.LogRecord("", 0, "", 0, "", None, None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .astimezone()
            .isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in self._RESERVED:
                continue
            data[key] = value if isinstance(value, (str, int, float, bool)) or value is None else repr(value)
        if record.exc_info:
            data.setdefault("traceback", self.formatException(record.exc_info))
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


class _ContextFilter(logging.Filter):
    """Stamp the session context onto every record reaching our handlers."""

    def __init__(self, context: Dict[str, Any]) -> None:
        super().__init__()
        self.context = dict(context)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class _HumanFormatter(logging.Formatter):
    """Formatter that appends contextual extras without failing on absence."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        meta_parts = []
        for key in ("app", "pid", "session_id"):
            value = getattr(record, key, None)
            if value is not None:
                meta_parts.append(f"{key}={value}")
        if meta_parts:
            return f"{base} [{' '.join(meta_parts)}]"
        return base


def _get_level() -> int:
    level_name = os.environ.get("APPKEY_LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_handlers(log_dir: Path, json_enabled: bool, context: Dict[str, Any]) -> None:
    text_handler = RotatingFileHandler(
        log_dir / "appkey.log",
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    text_handler.setFormatter(
        _HumanFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    handlers: List[logging.Handler] = [text_handler]

    if json_enabled:
        json_handler = RotatingFileHandler(
            log_dir / "appkey.jsonl",
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        json_handler.setFormatter(_JsonLineFormatter())
        handlers.append(json_handler)

    context_filter = _ContextFilter(context)
    for handler in handlers:
        handler.addFilter(context_filter)

    root_logger = logging.getLogger()
    for handler in _HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _HANDLERS[:] = handlers
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(_get_level())


def setup_logging(log_dir: Path | str, json_enabled: bool = True) -> logging.LoggerAdapter:
    """Configure application logging and return a logger adapter with base context."""

    global _ADAPTER
    if _ADAPTER is not None:
        return _ADAPTER

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    env_json = os.environ.get("APPKEY_LOG_JSON")
    if env_json is not None:
        json_enabled = env_json not in {"0", "false", "False"}

    base_extra = {
        "app": "appkey",
        "pid": os.getpid(),
        "session_id": _SESSION_ID,
    }
    _configure_handlers(log_path, json_enabled=json_enabled, context=base_extra)

    _ADAPTER = logging.LoggerAdapter(logging.getLogger("appkey"), base_extra)
    logging.captureWarnings(True)
    return _ADAPTER


def shutdown_logging() -> None:
    """Detach and close the handlers installed by :func:`setup_logging`."""

    global _ADAPTER
    root_logger = logging.getLogger()
    for handler in _HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _HANDLERS.clear()
    _ADAPTER = None

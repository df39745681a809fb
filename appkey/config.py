"""Configuration persistence for appkey.

The application keeps its settings, including the generated ``api_key``, in
a JSON file (``config.json``) inside the application's data directory. These
helpers load and save that file. A missing file is an empty configuration;
anything else that goes wrong is raised as a :class:`ConfigError` so the
caller decides whether startup may continue.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigDecodeError, ConfigReadError, ConfigWriteError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


def config_path(data_dir: Path | str) -> Path:
    """Return the path of ``config.json`` inside ``data_dir``."""

    return Path(data_dir) / CONFIG_FILENAME


def load_config(path: Path | str) -> Dict[str, Any]:
    """Load the configuration record stored at ``path``.

    Returns an empty dict when the file does not exist. Raises
    :class:`ConfigDecodeError` when the content is not a JSON object and
    :class:`ConfigReadError` for other I/O failures.
    """

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.debug("config.missing path=%s", path)
        return {}
    except json.JSONDecodeError as exc:
        raise ConfigDecodeError(
            f"Invalid JSON in {path} (line {exc.lineno}, column {exc.colno}): {exc.msg}",
            path,
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigDecodeError(f"{path} is not valid UTF-8", path) from exc
    except OSError as exc:
        raise ConfigReadError(f"Cannot read {path}: {exc.strerror or exc}", path) from exc

    if not isinstance(raw, dict):
        raise ConfigDecodeError(
            f"{path} must contain a JSON object, found {type(raw).__name__}", path
        )
    return raw


def save_config(path: Path | str, config: Dict[str, Any]) -> None:
    """Persist configuration to disk atomically."""

    path = Path(path)
    tmp_path = path.with_suffix(".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=2)
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigWriteError(f"Cannot write {path}: {exc.strerror or exc}", path) from exc
    logger.debug("config.saved path=%s keys=%s", path, sorted(config))


def update_config(path: Path | str, **fields: Any) -> Dict[str, Any]:
    """Merge ``fields`` into the stored configuration and save it."""

    config = load_config(path)
    config.update(fields)
    save_config(path, config)
    return config


__all__ = ["CONFIG_FILENAME", "config_path", "load_config", "save_config", "update_config"]

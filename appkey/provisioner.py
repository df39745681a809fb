"""Make sure the application has a persisted identifier and expose it."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from .config import config_path, load_config, save_config
from .errors import ConfigError
from .keygen import generate_api_key
from .registry import RequestRegistry

logger = logging.getLogger(__name__)

GET_API_KEY_CHANNEL = "get-api-key"


def _stored_key(config: dict) -> Optional[str]:
    value = config.get("api_key")
    if isinstance(value, str) and value:
        return value
    return None


def provision(
    data_dir: Path | str,
    registry: RequestRegistry,
    *,
    ephemeral_on_error: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """Return the application key, creating and saving one on first run.

    The key is read from ``<data_dir>/config.json``. When the file has no
    ``api_key`` a new one is generated and written back together with the
    existing fields. A ``get-api-key`` handler returning the key is
    registered on ``registry``.

    Configuration errors propagate unless ``ephemeral_on_error`` is set, in
    which case a new key is used for this process only and the file on disk
    is left as it is.
    """

    path = config_path(data_dir)
    try:
        config = load_config(path)
    except ConfigError as exc:
        if not ephemeral_on_error:
            raise
        logger.warning("api_key.load_failed path=%s error=%s; using ephemeral key", path, exc)
        api_key = generate_api_key(rng=rng)
    else:
        api_key = _stored_key(config)
        if api_key is None:
            api_key = generate_api_key(rng=rng)
            config["api_key"] = api_key
            try:
                save_config(path, config)
            except ConfigError as exc:
                if not ephemeral_on_error:
                    raise
                logger.warning(
                    "api_key.save_failed path=%s error=%s; using ephemeral key", path, exc
                )
            else:
                logger.info("api_key.generated path=%s", path)
        else:
            logger.debug("api_key.loaded path=%s", path)

    registry.handle(GET_API_KEY_CHANNEL, lambda: api_key)
    return api_key


__all__ = ["GET_API_KEY_CHANNEL", "provision"]

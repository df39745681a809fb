"""In-process registry of named request handlers."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List

from .errors import DuplicateHandlerError, NoHandlerError

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class RequestRegistry:
    """Maps channel names to handlers that answer requests synchronously.

    Only one handler may be registered per channel; registering a second one
    is an error until the first is removed.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}
        self._lock = threading.Lock()

    def handle(self, channel: str, handler: Handler) -> None:
        if not channel:
            raise ValueError("channel name must not be empty")
        if not callable(handler):
            raise TypeError("handler must be callable")
        with self._lock:
            if channel in self._handlers:
                raise DuplicateHandlerError(
                    f"Attempted to register a second handler for '{channel}'", channel
                )
            self._handlers[channel] = handler
        logger.debug("registry.handle channel=%s", channel)

    def remove_handler(self, channel: str) -> None:
        with self._lock:
            self._handlers.pop(channel, None)

    def invoke(self, channel: str, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            handler = self._handlers.get(channel)
        if handler is None:
            raise NoHandlerError(f"No handler registered for '{channel}'", channel)
        return handler(*args, **kwargs)

    def channels(self) -> List[str]:
        with self._lock:
            return sorted(self._handlers)

    def __contains__(self, channel: object) -> bool:
        with self._lock:
            return channel in self._handlers


__all__ = ["Handler", "RequestRegistry"]

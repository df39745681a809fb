"""Exception types raised while provisioning the application key."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AppKeyError(Exception):
    """Base class for all errors raised by :mod:`appkey`."""


class ConfigError(AppKeyError):
    """The configuration file could not be read, parsed or written."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    pass


class ConfigDecodeError(ConfigError):
    pass


class ConfigWriteError(ConfigError):
    pass


class RegistryError(AppKeyError):
    def __init__(self, message: str, channel: str) -> None:
        super().__init__(message)
        self.channel = channel


class DuplicateHandlerError(RegistryError):
    pass


class NoHandlerError(RegistryError):
    pass


__all__ = [
    "AppKeyError",
    "ConfigError",
    "ConfigReadError",
    "ConfigDecodeError",
    "ConfigWriteError",
    "RegistryError",
    "DuplicateHandlerError",
    "NoHandlerError",
]

"""Package version metadata and helpers."""

from __future__ import annotations

__version__ = "0.1.0"


def get_version() -> str:
    """Return the semantic version string for the application."""

    return __version__

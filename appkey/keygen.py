"""Generation of the local application identifier.

The key is a plain instance identifier, not a credential, so it is drawn
from :mod:`random` rather than :mod:`secrets`.
"""

from __future__ import annotations

import random
from typing import Any, Optional

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
KEY_LENGTH = 32

_rng = random.Random()


def _base36_digit(fraction: float) -> str:
    # first digit after the point of ``fraction`` written in base 36
    index = int(fraction * len(ALPHABET))
    return ALPHABET[min(index, len(ALPHABET) - 1)]


def generate_api_key(length: int = KEY_LENGTH, rng: Optional[random.Random] = None) -> str:
    """Return ``length`` characters drawn independently from ``[0-9a-z]``."""

    if length < 1:
        raise ValueError("length must be positive")
    source = rng or _rng
    return "".join(_base36_digit(source.random()) for _ in range(length))


def is_valid_api_key(value: Any) -> bool:
    if not isinstance(value, str) or len(value) != KEY_LENGTH:
        return False
    return all(ch in ALPHABET for ch in value)


__all__ = ["ALPHABET", "KEY_LENGTH", "generate_api_key", "is_valid_api_key"]

"""Bootstrap and expose the persisted application identifier."""

from .errors import AppKeyError, ConfigError
from .provisioner import GET_API_KEY_CHANNEL, provision
from .registry import RequestRegistry
from .version import __version__

__all__ = [
    "AppKeyError",
    "ConfigError",
    "GET_API_KEY_CHANNEL",
    "RequestRegistry",
    "provision",
    "__version__",
]

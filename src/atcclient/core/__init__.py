r"""Core configuration and validation shared by the client modules."""

from __future__ import annotations

__all__ = [
    "CONFIG_VERSION_HEADER",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "JSON_CONTENT_TYPE",
    "ClientConfig",
    "validate_api",
    "validate_timeout",
]

from atcclient.core.config import (
    CONFIG_VERSION_HEADER,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    JSON_CONTENT_TYPE,
    ClientConfig,
)
from atcclient.core.validation import validate_api, validate_timeout

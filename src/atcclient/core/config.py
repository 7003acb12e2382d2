r"""Configuration dataclass and defaults for the ATC client.

This module provides configuration constants and a dataclass-based
configuration object for ``ATCClient``.
"""

from __future__ import annotations

__all__ = [
    "CONFIG_VERSION_HEADER",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "JSON_CONTENT_TYPE",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from atcclient.core.validation import validate_timeout

if TYPE_CHECKING:
    import httpx


# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 30.0

# Response header carrying the version of a pipeline config
CONFIG_VERSION_HEADER = "X-Concourse-Config-Version"

JSON_CONTENT_TYPE = "application/json"

DEFAULT_USER_AGENT = "atcclient"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for ``ATCClient``.

    Args:
        timeout: Maximum seconds to wait for the server. Only used when
            the client creates its own ``httpx.Client``. Must be > 0.
        config_version_header: Name of the response header holding the
            config version.
        user_agent: Value of the ``User-Agent`` header sent with every
            request.

    Example:
        ```pycon
        >>> from atcclient.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.timeout
        30.0
        >>> config.merge(timeout=5.0).timeout
        5.0

        ```
    """

    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT
    config_version_header: str = CONFIG_VERSION_HEADER
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

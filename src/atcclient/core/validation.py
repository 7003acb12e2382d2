r"""Parameter validation utilities for the ATC client.

This module provides validation functions for the connection target and
the client configuration, so that invalid values are rejected when the
client is built rather than when the first request is sent.
"""

from __future__ import annotations

__all__ = ["validate_api", "validate_timeout"]

import httpx

from atcclient.exceptions import ConfigurationError

_SUPPORTED_SCHEMES = ("http", "https")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ConfigurationError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from atcclient.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        atcclient.exceptions.ConfigurationError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ConfigurationError(msg, field="timeout")


def validate_api(api: str) -> httpx.URL:
    """Validate the base API URL of a target.

    Surrounding whitespace is ignored. The API is a base URL, so it
    cannot carry a query string or a fragment.

    Args:
        api: The base API URL, e.g. ``"https://ci.example.com"``.

    Returns:
        The parsed URL.

    Raises:
        ConfigurationError: If the URL is blank, cannot be parsed, is
            not an absolute http(s) URL, or carries a query string or a
            fragment.

    Example:
        ```pycon
        >>> from atcclient.core.validation import validate_api
        >>> validate_api("https://ci.example.com").host
        'ci.example.com'

        ```
    """
    if not api or not api.strip():
        raise ConfigurationError("API is blank", field="api")
    try:
        url = httpx.URL(api.strip())
    except httpx.InvalidURL as exc:
        msg = f"API is not a valid URL: {api!r} ({exc})"
        raise ConfigurationError(msg, field="api", cause=exc) from exc
    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        msg = f"API must be an absolute http(s) URL, got {api!r}"
        raise ConfigurationError(msg, field="api")
    if url.query or url.fragment:
        msg = f"API must not carry a query string or a fragment, got {api!r}"
        raise ConfigurationError(msg, field="api")
    return url

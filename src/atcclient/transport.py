r"""Execute resolved requests over HTTP(S).

This module creates the ``httpx.Client`` used to talk to a target,
honoring its TLS policy, and sends ``ResolvedRequest`` objects through
it. Network-level failures are raised as ``TransportError`` and are
never retried.
"""

from __future__ import annotations

__all__ = ["build_ssl_context", "create_http_client", "send_request"]

import logging
import ssl
import time
from typing import TYPE_CHECKING, Any

import httpx

from atcclient.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from atcclient.core.validation import validate_timeout
from atcclient.exceptions import ConfigurationError, TransportError
from atcclient.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from atcclient.request import ResolvedRequest
    from atcclient.target import Target

logger: logging.Logger = logging.getLogger(__name__)


def build_ssl_context(cert: str, insecure: bool = False) -> ssl.SSLContext:
    r"""Create an SSL context presenting a client certificate.

    Args:
        cert: Path to a PEM file holding the client certificate and its
            private key.
        insecure: If ``True``, the server certificate is not verified.

    Returns:
        The SSL context.

    Raises:
        ConfigurationError: If the certificate file cannot be loaded.
    """
    context = ssl.create_default_context()
    try:
        context.load_cert_chain(cert)
    except (OSError, ssl.SSLError) as exc:
        msg = f"cannot load client certificate {cert!r}: {exc}"
        raise ConfigurationError(msg, field="cert", cause=exc) from exc
    if insecure:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def create_http_client(
    target: Target,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.Client:
    r"""Create the ``httpx.Client`` used to talk to a target.

    Redirects are followed, so a 3xx answer from a proxy in front of
    the ATC is not reported as an unexpected response.

    Args:
        target: The connection target.
        timeout: Maximum seconds to wait for the server. Must be > 0.
        user_agent: The ``User-Agent`` header sent with every request.

    Returns:
        A new ``httpx.Client``. The caller is responsible for closing it.

    Raises:
        ConfigurationError: If the timeout is invalid or the client
            certificate cannot be loaded.
    """
    validate_timeout(timeout)
    kwargs: dict[str, Any] = {
        "timeout": timeout,
        "headers": {"User-Agent": user_agent},
        "follow_redirects": True,
    }
    if target.cert:
        kwargs["verify"] = build_ssl_context(target.cert, insecure=target.insecure)
    elif target.insecure:
        kwargs["verify"] = False
    return httpx.Client(**kwargs)


def send_request(
    client: httpx.Client, request: ResolvedRequest, operation: str = ""
) -> httpx.Response:
    r"""Send one request and return the raw response.

    The response body is read in full before returning. The status code
    is not checked here.

    Args:
        client: The HTTP client to use.
        request: The request to send.
        operation: The operation name, used only for logging.

    Returns:
        The raw HTTP response.

    Raises:
        TransportError: If the request fails at the network level (DNS,
            refused connection, timeout, TLS handshake).
    """
    start_time = time.monotonic()
    try:
        response = client.send(request.to_httpx())
    except httpx.TimeoutException as exc:
        msg = f"{request.method} request to {request.url} timed out: {exc}"
        raise TransportError(msg, method=request.method, url=request.url, cause=exc) from exc
    except httpx.RequestError as exc:
        error_type = type(exc).__name__
        msg = f"{request.method} request to {request.url} failed with {error_type}: {exc}"
        raise TransportError(msg, method=request.method, url=request.url, cause=exc) from exc

    log_structured(
        logger,
        logging.DEBUG,
        f"{request.method} request to {request.url} returned status {response.status_code}",
        operation=operation,
        method=request.method,
        url=request.url,
        status_code=response.status_code,
        duration_ms=round((time.monotonic() - start_time) * 1000, 3),
    )
    return response

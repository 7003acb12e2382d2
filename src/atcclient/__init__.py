r"""atcclient - Route-table-driven HTTP client for the ATC API.

This package translates symbolic operation names (e.g. ``GetBuild``)
into concrete HTTP requests against an ATC, attaches basic auth, sends
them with httpx, and decodes the responses into typed results or
structured errors.

Example:
    ```pycon
    >>> from atcclient import OperationRequest, Target, new_client
    >>> from atcclient.atc import LIST_CONTAINERS, Container
    >>> client = new_client(Target("https://ci.example.com", "admin", "secret"))
    >>> response = client.send(  # doctest: +SKIP
    ...     OperationRequest(LIST_CONTAINERS, queries={"type": "check"}), list[Container]
    ... )
    >>> client.close()

    ```
"""

from __future__ import annotations

__all__ = [
    "ATCClient",
    "ATCClientError",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "MissingPathParamError",
    "OperationRequest",
    "Response",
    "Route",
    "RouteError",
    "RouteTable",
    "Target",
    "TransportError",
    "UnexpectedResponseError",
    "UnknownOperationError",
    "__version__",
    "new_client",
]

from importlib.metadata import PackageNotFoundError, version

from atcclient.client import ATCClient, new_client
from atcclient.exceptions import (
    ATCClientError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    ErrorKind,
    MissingPathParamError,
    RouteError,
    TransportError,
    UnexpectedResponseError,
    UnknownOperationError,
)
from atcclient.request import OperationRequest
from atcclient.response import Response
from atcclient.routes import Route, RouteTable
from atcclient.target import Target

try:
    __version__ = version("atc-client")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

r"""Define the exceptions raised by the ATC client.

Every error raised by the client derives from ``ATCClientError`` and
carries an ``ErrorKind`` discriminant, so callers can either catch a
specific subclass or branch on ``err.kind``.
"""

from __future__ import annotations

__all__ = [
    "ATCClientError",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "MissingPathParamError",
    "RouteError",
    "TransportError",
    "UnexpectedResponseError",
    "UnknownOperationError",
]

from enum import Enum


class ErrorKind(str, Enum):
    r"""Enumerate the failure classes of a client call."""

    CONFIGURATION = "configuration"
    ROUTE = "route"
    TRANSPORT = "transport"
    UNEXPECTED_RESPONSE = "unexpected_response"
    DECODE = "decode"
    ENCODE = "encode"


class ATCClientError(Exception):
    r"""Base class of all the errors raised by the ATC client.

    Args:
        message: The error message.
        cause: The optional exception that caused this error.

    Example:
        ```pycon
        >>> from atcclient.exceptions import ATCClientError, TransportError
        >>> err = TransportError("connection refused", method="GET", url="http://ci/api")
        >>> isinstance(err, ATCClientError)
        True
        >>> err.kind.value
        'transport'

        ```
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ATCClientError, ValueError):
    r"""Raised when a target or a client configuration is invalid.

    Args:
        message: The error message, which names the invalid field.
        field: The name of the invalid field, if known.
        cause: The optional exception that caused this error.
    """

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self, message: str, field: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.field = field


class RouteError(ATCClientError):
    r"""Raised when an operation cannot be resolved to a concrete route.

    Args:
        message: The error message.
        operation: The name of the operation that failed to resolve.
    """

    kind = ErrorKind.ROUTE

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class UnknownOperationError(RouteError):
    r"""Raised when no route is registered for an operation name."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"unknown operation: {operation!r}", operation=operation)


class MissingPathParamError(RouteError):
    r"""Raised when a path template references a parameter that was not
    given.

    Args:
        operation: The name of the operation.
        param: The name of the missing path parameter.
    """

    def __init__(self, operation: str, param: str) -> None:
        super().__init__(
            f"missing path parameter {param!r} for operation {operation!r}",
            operation=operation,
        )
        self.param = param


class TransportError(ATCClientError):
    r"""Raised when the HTTP exchange itself fails.

    This covers DNS failures, refused connections, timeouts and TLS
    handshake failures. The original ``httpx`` exception is available
    as ``cause`` and as ``__cause__``.

    Args:
        message: The error message.
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        cause: The optional exception that caused this error.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self, message: str, method: str, url: str, cause: BaseException | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.method = method
        self.url = url


class UnexpectedResponseError(ATCClientError):
    r"""Raised when the server answers with a status outside ``[200, 300)``.

    Args:
        status_code: The HTTP status code of the response.
        body: The raw response body, or an empty string if it could not
            be read.
        method: The HTTP method of the request.
        url: The URL of the request.
        config_version: The config version sent by the server, if any.

    Example:
        ```pycon
        >>> from atcclient.exceptions import UnexpectedResponseError
        >>> err = UnexpectedResponseError(500, "problem")
        >>> err.status_code, err.body
        (500, 'problem')
        >>> str(err)
        'Unexpected Response\nStatus: 500\nBody:\nproblem'

        ```
    """

    kind = ErrorKind.UNEXPECTED_RESPONSE

    def __init__(
        self,
        status_code: int,
        body: str,
        method: str = "",
        url: str = "",
        config_version: int | None = None,
    ) -> None:
        super().__init__(f"Unexpected Response\nStatus: {status_code}\nBody:\n{body}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.config_version = config_version


class DecodeError(ATCClientError):
    r"""Raised when a successful response body does not match the
    expected result shape.

    Args:
        message: The error message.
        status_code: The HTTP status code of the response.
        body: The raw response body.
        cause: The optional exception that caused this error.
    """

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.body = body


class EncodeError(ATCClientError):
    r"""Raised when a request body cannot be serialized to JSON."""

    kind = ErrorKind.ENCODE

r"""Build transport-ready requests from resolved operations.

This module turns a resolved method and path, query parameters,
credentials and an optional body into a ``ResolvedRequest``. Nothing in
this module performs I/O.
"""

from __future__ import annotations

__all__ = [
    "OperationRequest",
    "ResolvedRequest",
    "basic_auth_header",
    "build_request",
    "encode_body",
]

import base64
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx
from pydantic_core import PydanticSerializationError, to_jsonable_python

from atcclient.core.config import JSON_CONTENT_TYPE
from atcclient.exceptions import EncodeError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class OperationRequest:
    r"""Describe one call to a named remote operation.

    Args:
        name: The operation name, looked up in the route table.
        params: The path parameter values, by placeholder name.
        queries: The query parameters.
        body: The optional request body. Any JSON-representable value,
            including pydantic models and dataclasses, is accepted.
        headers: Extra request headers.

    Example:
        ```pycon
        >>> from atcclient.request import OperationRequest
        >>> OperationRequest("GetBuild", params={"build_id": "42"}).name
        'GetBuild'

        ```
    """

    name: str
    params: Mapping[str, str] = field(default_factory=dict)
    queries: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedRequest:
    r"""A concrete HTTP request, ready to be sent.

    Args:
        method: The upper-case HTTP method.
        url: The absolute URL, query string included.
        headers: The request headers.
        content: The serialized body. Empty if there is no body.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    def to_httpx(self) -> httpx.Request:
        r"""Convert the request to an ``httpx.Request``."""
        return httpx.Request(
            self.method, self.url, headers=dict(self.headers), content=self.content
        )


def basic_auth_header(username: str, password: str) -> str:
    r"""Return the value of a basic auth ``Authorization`` header.

    Example:
        ```pycon
        >>> from atcclient.request import basic_auth_header
        >>> basic_auth_header("foo", "bar")
        'Basic Zm9vOmJhcg=='

        ```
    """
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


def encode_body(body: Any) -> bytes:
    r"""Serialize a body to canonical JSON.

    Keys are sorted and separators are compact, so equal values always
    produce the same bytes.

    Args:
        body: The value to serialize.

    Returns:
        The UTF-8 encoded JSON document.

    Raises:
        EncodeError: If the value is not JSON-representable.

    Example:
        ```pycon
        >>> from atcclient.request import encode_body
        >>> encode_body({"b": 1, "a": [True, None]})
        b'{"a":[true,null],"b":1}'

        ```
    """
    try:
        data = to_jsonable_python(body)
        return json.dumps(data, sort_keys=True, separators=(",", ":")).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        msg = f"cannot serialize request body of type {type(body).__name__}: {exc}"
        raise EncodeError(msg, cause=exc) from exc


def build_request(
    api: str | httpx.URL,
    method: str,
    path: str,
    *,
    queries: Mapping[str, str] | None = None,
    username: str = "",
    password: str = "",
    body: Any = None,
    headers: Mapping[str, str] | None = None,
) -> ResolvedRequest:
    r"""Build a ``ResolvedRequest``.

    Basic auth is attached only if both ``username`` and ``password``
    are non-blank. Partial credentials mean no authentication.

    Args:
        api: The base API URL. A string is stripped of surrounding
            whitespace before it is parsed.
        method: The HTTP method.
        path: The resolved path, without query string.
        queries: The query parameters. They are sorted by key.
        username: The basic auth username.
        password: The basic auth password.
        body: The optional body. ``None`` means an empty body.
        headers: Extra request headers. They cannot replace the
            ``Authorization`` header set from the credentials.

    Returns:
        The resolved request.

    Raises:
        EncodeError: If the body cannot be serialized.

    Example:
        ```pycon
        >>> from atcclient.request import build_request
        >>> req = build_request(
        ...     "http://ci.example.com", "GET", "/api/v1/containers", queries={"type": "check"}
        ... )
        >>> req.url
        'http://ci.example.com/api/v1/containers?type=check'

        ```
    """
    base = api if isinstance(api, httpx.URL) else httpx.URL(api.strip())
    url = base.copy_with(path=base.path.rstrip("/") + path)
    if queries:
        url = url.copy_merge_params(sorted(queries.items()))

    request_headers: dict[str, str] = dict(headers or {})
    content = b""
    if body is not None:
        content = encode_body(body)
        request_headers["Content-Type"] = JSON_CONTENT_TYPE
    if username.strip() and password.strip():
        request_headers = {k: v for k, v in request_headers.items() if k.lower() != "authorization"}
        request_headers["Authorization"] = basic_auth_header(username, password)

    return ResolvedRequest(
        method=method.upper(), url=str(url), headers=request_headers, content=content
    )

r"""Decode raw HTTP responses into typed results or errors."""

from __future__ import annotations

__all__ = ["Response", "decode_response", "extract_config_version", "read_body"]

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from atcclient.core.config import CONFIG_VERSION_HEADER
from atcclient.exceptions import DecodeError, UnexpectedResponseError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Response(Generic[T]):
    r"""The outcome of a successful call.

    Args:
        status_code: The HTTP status code, in ``[200, 300)``.
        result: The decoded body, or ``None`` if no result type was
            requested.
        config_version: The config version sent by the server, if any.
        headers: The response headers.
    """

    status_code: int
    result: T | None = None
    config_version: int | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


@lru_cache(maxsize=128)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def extract_config_version(
    response: httpx.Response, header: str = CONFIG_VERSION_HEADER
) -> int | None:
    r"""Extract the config version from the response headers.

    Args:
        response: The HTTP response.
        header: The name of the header holding the version.

    Returns:
        The config version, or ``None`` if the header is absent or is
        not an integer.

    Example:
        ```pycon
        >>> import httpx
        >>> from atcclient.response import extract_config_version
        >>> extract_config_version(
        ...     httpx.Response(200, headers={"X-Concourse-Config-Version": "42"})
        ... )
        42

        ```
    """
    value = response.headers.get(header)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"Ignoring malformed {header} header: {value!r}")
        return None


def read_body(response: httpx.Response) -> str:
    r"""Read the body of an error response.

    Reading failures degrade to an empty body, so they never hide the
    status code of the response.
    """
    try:
        response.read()
        return response.text
    except (httpx.HTTPError, httpx.StreamError) as exc:
        logger.debug(f"Could not read response body: {exc}")
        return ""


def decode_response(
    response: httpx.Response,
    result_type: type[T] | Any | None = None,
    config_version_header: str = CONFIG_VERSION_HEADER,
) -> Response[T]:
    r"""Decode a raw response.

    Args:
        response: The raw HTTP response.
        result_type: The expected shape of a successful body, e.g.
            ``Build`` or ``list[Container]``. If ``None``, the body of a
            successful response is discarded. A 204 response always
            yields a ``None`` result.
        config_version_header: The name of the header holding the
            config version.

    Returns:
        The decoded response.

    Raises:
        UnexpectedResponseError: If the status code is outside
            ``[200, 300)``.
        DecodeError: If the body of a successful response is not valid
            JSON or does not match ``result_type``.

    Example:
        ```pycon
        >>> import httpx
        >>> from atcclient.response import decode_response
        >>> decode_response(httpx.Response(200, json=[1, 2]), list[int]).result
        [1, 2]

        ```
    """
    config_version = extract_config_version(response, config_version_header)
    status_code = response.status_code
    if not 200 <= status_code < 300:
        method, url = _request_line(response)
        raise UnexpectedResponseError(
            status_code=status_code,
            body=read_body(response),
            method=method,
            url=url,
            config_version=config_version,
        )

    result = None
    # 204 has no body by definition, so there is nothing to decode
    if result_type is not None and status_code != 204:
        content = response.read()
        try:
            result = _type_adapter(result_type).validate_json(content)
        except ValidationError as exc:
            body = content.decode("utf-8", errors="replace")
            msg = f"cannot decode response body with status {status_code}: {exc}"
            raise DecodeError(msg, status_code=status_code, body=body, cause=exc) from exc

    return Response(
        status_code=status_code,
        result=result,
        config_version=config_version,
        headers=dict(response.headers),
    )


def _request_line(response: httpx.Response) -> tuple[str, str]:
    # Responses built by hand have no request attached
    try:
        request = response.request
    except RuntimeError:
        return "", ""
    return request.method, str(request.url)

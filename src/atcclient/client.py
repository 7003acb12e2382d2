r"""Route-table-driven client for the ATC API.

``ATCClient.send`` is the single entry point: it resolves the operation
name through the route table, builds the request, sends it and decodes
the response. ``new_client`` validates a target and builds a client
bound to it.
"""

from __future__ import annotations

__all__ = ["ATCClient", "new_client"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from atcclient.atc import (
    CREATE_BUILD,
    DELETE_PIPELINE,
    GET_BUILD,
    LIST_CONTAINERS,
    ROUTES,
    Build,
    Container,
)
from atcclient.core.config import ClientConfig
from atcclient.request import OperationRequest, build_request
from atcclient.response import Response, decode_response
from atcclient.transport import create_http_client, send_request

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    import httpx

    from atcclient.routes import RouteTable
    from atcclient.target import Target

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class ATCClient:
    r"""Client sending named operations to an ATC.

    The client keeps no mutable state across calls besides the
    underlying ``httpx.Client``, so one instance can be shared by
    concurrent callers.

    Args:
        target: The connection target. It is validated.
        routes: The route table used to resolve operation names.
        config: Optional client configuration. If ``None``, a default
            ``ClientConfig`` is used.
        client: Optional ``httpx.Client`` to send the requests with. If
            ``None``, one is created from the target TLS policy and the
            client closes it in ``close``. An injected client is never
            closed by ``ATCClient``.

    Raises:
        ConfigurationError: If the target or the configuration is invalid.

    Example:
        ```pycon
        >>> from atcclient import ATCClient, OperationRequest, Target
        >>> from atcclient.atc import GET_BUILD, Build
        >>> with ATCClient(Target("https://ci.example.com")) as client:  # doctest: +SKIP
        ...     response = client.send(
        ...         OperationRequest(GET_BUILD, params={"build_id": "42"}), Build
        ...     )
        ...     build = response.result
        ...

        ```
    """

    def __init__(
        self,
        target: Target,
        routes: RouteTable = ROUTES,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = target.validate()
        self._target = target
        self._routes = routes
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or create_http_client(
            target, timeout=self._config.timeout, user_agent=self._config.user_agent
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(target={self._target!r}, routes={len(self._routes)})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def target(self) -> Target:
        r"""The connection target the client is bound to."""
        return self._target

    @property
    def routes(self) -> RouteTable:
        r"""The route table used to resolve operation names."""
        return self._routes

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        r"""Close the underlying ``httpx.Client`` if this client created
        it."""
        if self._owns_client:
            self._client.close()

    def send(
        self, request: OperationRequest, result_type: type[T] | Any | None = None
    ) -> Response[T]:
        r"""Send a named operation and decode its response.

        Args:
            request: The operation to send.
            result_type: The expected shape of a successful body, e.g.
                ``Build`` or ``list[Container]``. If ``None``, the body
                of a successful response is discarded.

        Returns:
            The decoded response. Its ``config_version`` holds the value
            of the config version header, if the server sent one.

        Raises:
            UnknownOperationError: If the operation is not in the route
                table.
            MissingPathParamError: If a path parameter is missing.
            EncodeError: If the body cannot be serialized.
            TransportError: If the request fails at the network level.
            UnexpectedResponseError: If the status code is outside
                ``[200, 300)``.
            DecodeError: If a successful body does not match
                ``result_type``.
        """
        method, path = self._routes.resolve(request.name, request.params)
        resolved = build_request(
            self._base_url,
            method,
            path,
            queries=request.queries,
            username=self._target.username,
            password=self._target.password,
            body=request.body,
            headers=request.headers,
        )
        logger.debug(f"Sending {request.name} as {resolved.method} {resolved.url}")
        response = send_request(self._client, resolved, operation=request.name)
        return decode_response(
            response,
            result_type,
            config_version_header=self._config.config_version_header,
        )

    def get_build(self, build_id: str | int) -> Build | None:
        r"""Return the build with the given ID, or ``None`` if the server
        answered with 204 No Content."""
        request = OperationRequest(GET_BUILD, params={"build_id": str(build_id)})
        return self.send(request, Build).result

    def list_containers(
        self, queries: Mapping[str, str] | None = None
    ) -> list[Container] | None:
        r"""Return the containers matching the given query parameters,
        e.g. ``{"type": "check"}``, or ``None`` if the server answered
        with 204 No Content."""
        request = OperationRequest(LIST_CONTAINERS, queries=dict(queries or {}))
        return self.send(request, list[Container]).result

    def delete_pipeline(self, pipeline_name: str) -> None:
        self.send(OperationRequest(DELETE_PIPELINE, params={"pipeline_name": pipeline_name}))

    def create_build(self, plan: Any) -> Build | None:
        r"""Start a one-off build running the given plan.

        Returns:
            The created build, or ``None`` if the server answered with
            204 No Content.
        """
        return self.send(OperationRequest(CREATE_BUILD, body=plan), Build).result


def new_client(
    target: Target,
    routes: RouteTable = ROUTES,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> ATCClient:
    r"""Validate a target and return a client bound to it.

    Args:
        target: The connection target.
        routes: The route table used to resolve operation names.
        config: Optional client configuration.
        client: Optional ``httpx.Client`` to send the requests with.

    Returns:
        The client.

    Raises:
        ConfigurationError: If the target is invalid. The message names
            the invalid field, e.g. ``"API is blank"``.

    Example:
        ```pycon
        >>> from atcclient import Target, new_client
        >>> new_client(Target(""))
        Traceback (most recent call last):
        ...
        atcclient.exceptions.ConfigurationError: API is blank

        ```
    """
    return ATCClient(target, routes, config=config, client=client)

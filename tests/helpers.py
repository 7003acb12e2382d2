r"""Shared test helpers for the ATC client tests.

``FakeATC`` plays the role of an ATC server: it answers the requests of
an ``httpx.Client`` through ``httpx.MockTransport``, one queued handler
per request, and records every request it receives.
"""

from __future__ import annotations

__all__ = [
    "TEST_API",
    "FakeATC",
    "create_mock_response",
    "respond_with",
    "respond_with_json",
]

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_API = "http://atc.example.com"


class FakeATC:
    r"""Fake ATC answering requests with queued handlers.

    Each received request is answered by the next queued handler. A
    request received when no handler is left is answered with a 599
    status so the test fails with an ``UnexpectedResponseError``.
    """

    def __init__(self) -> None:
        self.handlers: list[Callable[[httpx.Request], httpx.Response]] = []
        self.received_requests: list[httpx.Request] = []

    def append_handlers(self, *handlers: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handlers.extend(handlers)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.received_requests.append(request)
        if not self.handlers:
            return httpx.Response(599, text=f"unhandled request: {request.method} {request.url}")
        return self.handlers.pop(0)(request)

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


def respond_with(
    status_code: int, body: str = "", headers: dict[str, str] | None = None
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body, headers=headers)

    return handler


def respond_with_json(
    status_code: int, payload: Any, headers: dict[str, str] | None = None
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload), headers=headers)

    return handler


def create_mock_response(status_code: int = 200, **kwargs: Any) -> Mock:
    r"""Create a mock ``httpx.Response`` with the given status code."""
    return Mock(spec=httpx.Response, status_code=status_code, **kwargs)

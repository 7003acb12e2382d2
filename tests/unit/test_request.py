from __future__ import annotations

import json
from dataclasses import dataclass

import httpx
import pytest
from pydantic import BaseModel

from atcclient.exceptions import EncodeError, ErrorKind
from atcclient.request import (
    OperationRequest,
    ResolvedRequest,
    basic_auth_header,
    build_request,
    encode_body,
)

TEST_API = "https://ci.example.com"


######################################
#     Tests for OperationRequest     #
######################################


def test_operation_request_defaults() -> None:
    request = OperationRequest("ListBuilds")
    assert request.params == {}
    assert request.queries == {}
    assert request.body is None
    assert request.headers == {}


#######################################
#     Tests for basic_auth_header     #
#######################################


def test_basic_auth_header() -> None:
    assert basic_auth_header("foo", "bar") == "Basic Zm9vOmJhcg=="


def test_basic_auth_header_matches_httpx() -> None:
    request = httpx.Request("GET", TEST_API)
    auth_request = next(httpx.BasicAuth("admin", "pä:ss").auth_flow(request))
    assert basic_auth_header("admin", "pä:ss") == auth_request.headers["Authorization"]


#################################
#     Tests for encode_body     #
#################################


def test_encode_body_is_canonical() -> None:
    assert encode_body({"b": 1, "a": {"d": [1, 2], "c": None}}) == (
        b'{"a":{"c":null,"d":[1,2]},"b":1}'
    )


def test_encode_body_round_trip() -> None:
    body = {
        "on_success": {
            "step": {"aggregate": [{"get": "repo"}, {"get": "version"}]},
            "next": {"task": {"name": "one-off", "privileged": True, "timeout": 1.5}},
        },
        "unicode": "héllo",
    }
    assert json.loads(encode_body(body)) == body


def test_encode_body_pydantic_model() -> None:
    class Location(BaseModel):
        id: int
        parent_id: int = 0

    assert encode_body(Location(id=4)) == b'{"id":4,"parent_id":0}'


def test_encode_body_dataclass() -> None:
    @dataclass
    class TaskPlan:
        name: str
        privileged: bool

    assert json.loads(encode_body(TaskPlan(name="one-off", privileged=True))) == {
        "name": "one-off",
        "privileged": True,
    }


def test_encode_body_not_serializable() -> None:
    with pytest.raises(
        EncodeError, match=r"cannot serialize request body of type object"
    ) as exc_info:
        encode_body(object())
    assert exc_info.value.kind == ErrorKind.ENCODE
    assert exc_info.value.__cause__ is not None


###################################
#     Tests for build_request     #
###################################


def test_build_request_minimal() -> None:
    request = build_request(TEST_API, "get", "/api/v1/builds/foo")
    assert request == ResolvedRequest(
        method="GET", url="https://ci.example.com/api/v1/builds/foo", headers={}, content=b""
    )


def test_build_request_strips_trailing_slash() -> None:
    request = build_request(f"{TEST_API}/", "GET", "/api/v1/builds")
    assert request.url == "https://ci.example.com/api/v1/builds"


def test_build_request_strips_surrounding_whitespace() -> None:
    request = build_request(f"  {TEST_API}  ", "DELETE", "/api/v1/pipelines/foo")
    assert request.url == "https://ci.example.com/api/v1/pipelines/foo"


def test_build_request_parsed_base_url() -> None:
    request = build_request(httpx.URL(f"{TEST_API}/ci/"), "GET", "/api/v1/builds/a%20b%2Fc")
    assert request.url == "https://ci.example.com/ci/api/v1/builds/a%20b%2Fc"


def test_build_request_query() -> None:
    request = build_request(TEST_API, "GET", "/api/v1/containers", queries={"type": "check"})
    assert request.url == "https://ci.example.com/api/v1/containers?type=check"


def test_build_request_query_sorted_and_escaped() -> None:
    request = build_request(
        TEST_API, "GET", "/api/v1/containers", queries={"name": "a b&c", "build-id": "1"}
    )
    url = httpx.URL(request.url)
    assert url.query == b"build-id=1&name=a+b%26c"
    assert url.params["name"] == "a b&c"


def test_build_request_basic_auth() -> None:
    request = build_request(TEST_API, "GET", "/api/v1/builds", username="foo", password="bar")
    assert request.headers == {"Authorization": "Basic Zm9vOmJhcg=="}


@pytest.mark.parametrize(
    ("username", "password"), [("foo", ""), ("", "bar"), ("", ""), ("foo", " ")]
)
def test_build_request_partial_credentials(username: str, password: str) -> None:
    request = build_request(
        TEST_API, "GET", "/api/v1/builds", username=username, password=password
    )
    assert "Authorization" not in request.headers


def test_build_request_body() -> None:
    request = build_request(TEST_API, "POST", "/api/v1/builds", body={"plan": {"id": 1}})
    assert request.content == b'{"plan":{"id":1}}'
    assert request.headers["Content-Type"] == "application/json"


def test_build_request_falsy_body_is_sent() -> None:
    request = build_request(TEST_API, "PUT", "/api/v1/pipelines/main/config", body={})
    assert request.content == b"{}"


def test_build_request_extra_headers() -> None:
    request = build_request(
        TEST_API, "PUT", "/x", headers={"X-Concourse-Config-Version": "3"}
    )
    assert request.headers == {"X-Concourse-Config-Version": "3"}


def test_build_request_extra_headers_cannot_replace_auth() -> None:
    request = build_request(
        TEST_API,
        "GET",
        "/x",
        username="foo",
        password="bar",
        headers={"authorization": "Bearer token"},
    )
    assert request.headers == {"Authorization": "Basic Zm9vOmJhcg=="}


def test_build_request_unserializable_body() -> None:
    with pytest.raises(EncodeError):
        build_request(TEST_API, "POST", "/api/v1/builds", body={"when": object()})


def test_resolved_request_to_httpx() -> None:
    request = build_request(
        TEST_API, "POST", "/api/v1/builds", username="foo", password="bar", body=[1]
    ).to_httpx()
    assert isinstance(request, httpx.Request)
    assert request.method == "POST"
    assert request.url == httpx.URL("https://ci.example.com/api/v1/builds")
    assert request.headers["Authorization"] == "Basic Zm9vOmJhcg=="
    assert request.content == b"[1]"

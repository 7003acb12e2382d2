from __future__ import annotations

import dataclasses

import pytest

from atcclient.exceptions import ConfigurationError
from atcclient.target import Target


def test_target_defaults() -> None:
    target = Target("https://ci.example.com")
    assert target.username == ""
    assert target.password == ""
    assert target.cert == ""
    assert target.insecure is False


def test_target_is_frozen() -> None:
    target = Target("https://ci.example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.api = "https://other.example.com"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("username", "password", "expected"),
    [
        ("foo", "bar", True),
        ("foo", "", False),
        ("", "bar", False),
        ("", "", False),
        ("  ", "bar", False),
    ],
)
def test_target_has_credentials(username: str, password: str, expected: bool) -> None:
    assert Target("https://ci.example.com", username, password).has_credentials is expected


@pytest.mark.parametrize(
    "api", ["https://ci.example.com", "http://localhost:8080", "http://10.0.0.1/ci/"]
)
def test_target_validate(api: str) -> None:
    Target(api).validate()


def test_target_validate_returns_parsed_url() -> None:
    url = Target("  http://ci.example.com/ci/  ").validate()
    assert url.host == "ci.example.com"
    assert url.path == "/ci/"


def test_target_validate_blank() -> None:
    with pytest.raises(ConfigurationError, match=r"API is blank"):
        Target("").validate()


def test_target_repr_hides_password() -> None:
    target = Target("https://ci.example.com", "admin", "s3cret")
    assert "s3cret" not in repr(target)
    assert "password='***'" in repr(target)


def test_target_repr_without_password() -> None:
    assert "password=''" in repr(Target("https://ci.example.com"))

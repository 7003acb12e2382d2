from __future__ import annotations

import dataclasses

import pytest

from atcclient.core.config import (
    CONFIG_VERSION_HEADER,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ClientConfig,
)
from atcclient.exceptions import ConfigurationError


def test_client_config_defaults() -> None:
    config = ClientConfig()
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.config_version_header == CONFIG_VERSION_HEADER
    assert config.user_agent == DEFAULT_USER_AGENT


def test_client_config_invalid_timeout() -> None:
    with pytest.raises(ConfigurationError, match=r"timeout must be > 0, got -5"):
        ClientConfig(timeout=-5)


def test_client_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ClientConfig().timeout = 1.0  # type: ignore[misc]


def test_client_config_merge() -> None:
    config = ClientConfig(timeout=5.0)
    merged = config.merge(user_agent="fly/1.0", timeout=None)
    assert merged == ClientConfig(timeout=5.0, user_agent="fly/1.0")
    assert config.user_agent == DEFAULT_USER_AGENT


def test_client_config_merge_validates() -> None:
    with pytest.raises(ConfigurationError):
        ClientConfig().merge(timeout=0)

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from atcclient import ATCClient, Target, new_client
from tests.helpers import TEST_API, FakeATC

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def atc_server() -> FakeATC:
    """Create a fake ATC answering with queued handlers."""
    return FakeATC()


@pytest.fixture
def target() -> Target:
    """Create a target without credentials."""
    return Target(TEST_API)


@pytest.fixture
def client(atc_server: FakeATC, target: Target) -> Generator[ATCClient, None, None]:
    """Create a client talking to the fake ATC."""
    http_client = atc_server.http_client()
    with new_client(target, client=http_client) as atc_client:
        yield atc_client
    http_client.close()

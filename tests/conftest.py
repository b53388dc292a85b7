from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import pytest_asyncio

from netrequest import Fetcher, NetworkRequest
from tests.helpers import TEST_BASE_URL, RecordingFetcher, create_echo_transport

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture
def recording_fetcher() -> RecordingFetcher:
    """Create a fetcher test double recording the specs it receives."""
    return RecordingFetcher()


@pytest_asyncio.fixture
async def echo_fetcher() -> AsyncGenerator[Fetcher, None]:
    """Create a Fetcher whose requests are echoed back as JSON."""
    async with Fetcher(
        name="echo",
        base_url=TEST_BASE_URL,
        headers={"X-Client": "netrequest", "Accept": "application/json"},
        transport=create_echo_transport(),
    ) as fetcher:
        yield fetcher


@pytest_asyncio.fixture
async def echo_network_request() -> AsyncGenerator[NetworkRequest, None]:
    """Create a NetworkRequest whose requests are echoed back as JSON."""
    async with NetworkRequest(
        name="echo", base_url=TEST_BASE_URL, transport=create_echo_transport()
    ) as network_request:
        yield network_request

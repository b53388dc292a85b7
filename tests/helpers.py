r"""Shared test helpers for fetcher and network request tests."""

from __future__ import annotations

__all__ = [
    "TEST_BASE_URL",
    "RecordingFetcher",
    "create_echo_transport",
    "create_failing_transport",
    "create_mock_response",
    "create_redirect_transport",
    "echo_handler",
]

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import httpx

from netrequest.fetcher import BaseFetcher

if TYPE_CHECKING:
    from netrequest.core.config import RequestSpec

TEST_BASE_URL = "https://api.example.com/v1"


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Echo the received request back as a JSON document.

    The response body has the keys ``method``, ``url``, ``headers``
    (lower-cased names), ``query`` and ``body`` (decoded JSON or
    ``None``).
    """
    return httpx.Response(
        status_code=200,
        json={
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "query": dict(request.url.params),
            "body": json.loads(request.content) if request.content else None,
        },
    )


def create_echo_transport() -> httpx.MockTransport:
    """Create a transport that answers every request with
    ``echo_handler``."""
    return httpx.MockTransport(echo_handler)


def create_redirect_transport(redirects: dict[str, str]) -> httpx.MockTransport:
    """Create a transport answering with a 302 for every path in
    ``redirects`` (mapped to its ``Location``) and echoing the rest."""

    def handler(request: httpx.Request) -> httpx.Response:
        location = redirects.get(request.url.path)
        if location is not None:
            return httpx.Response(status_code=302, headers={"Location": location})
        return echo_handler(request)

    return httpx.MockTransport(handler)


def create_failing_transport(exc: Exception) -> httpx.MockTransport:
    """Create a transport that raises ``exc`` for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)


def create_mock_response(status_code: int = 200, **kwargs: Any) -> Mock:
    """Create a mock httpx.Response with the given status code."""
    return Mock(spec=httpx.Response, status_code=status_code, **kwargs)


class RecordingFetcher(BaseFetcher):
    """Fetcher test double recording every spec it is asked to send.

    Args:
        response: The response returned by every call. A mock response
            with status code 200 is used if not provided.
    """

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.response = response if response is not None else create_mock_response()
        self.specs: list[RequestSpec] = []

    async def send(self, spec: RequestSpec) -> httpx.Response:
        self.specs.append(spec)
        return self.response

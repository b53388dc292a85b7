r"""netrequest - Minimal asynchronous HTTP request helpers.

This package provides a ``Fetcher`` that resolves request paths against
a base URL and dispatches them over a pooled ``httpx.AsyncClient``, and
a ``NetworkRequest`` facade that defaults the JSON content type and
decodes responses into a uniform ``ApplicationError`` on failure.

Example:
    ```pycon
    >>> import asyncio
    >>> from netrequest import NetworkRequest, RequestSpec
    >>> async def main():  # doctest: +SKIP
    ...     async with NetworkRequest(name="api", base_url="https://api.example.com") as api:
    ...         fetcher = api.get_fetcher()
    ...         response = await fetcher.post(RequestSpec(path="/items", body={"a": 1}))
    ...         user = await api.send(RequestSpec(path="/auth/who-am-i", bearer_auth="token"))
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
    "ApplicationError",
    "BaseFetcher",
    "Fetcher",
    "FetcherConfig",
    "NetworkRequest",
    "RequestSpec",
    "TransportError",
    "__version__",
    "resolve_url",
]

from importlib.metadata import PackageNotFoundError, version

from netrequest.core import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_TIMEOUT,
    FetcherConfig,
    RequestSpec,
    resolve_url,
)
from netrequest.exceptions import ApplicationError, TransportError
from netrequest.fetcher import BaseFetcher, Fetcher
from netrequest.network_request import NetworkRequest

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"

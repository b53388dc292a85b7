r"""Fetcher backed by a pooled ``httpx.AsyncClient``.

The ``Fetcher`` resolves request paths against a fixed base URL and
dispatches them over one long-lived ``httpx.AsyncClient``, so
connections are reused across calls. The fetcher holds no mutable state
besides the client's connection pool and can be shared by concurrent
tasks.
"""

from __future__ import annotations

__all__ = ["Fetcher"]

import logging
from typing import TYPE_CHECKING

import httpx

from netrequest.core.config import DEFAULT_MAX_REDIRECTS, FetcherConfig
from netrequest.core.url import resolve_url
from netrequest.fetcher.base import BaseFetcher

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from netrequest.core.config import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


class Fetcher(BaseFetcher):
    r"""Send requests relative to a base URL over a pooled HTTP client.

    The fetcher is configured either with a ``FetcherConfig`` or with
    keyword arguments. When both are given, the non-None keyword
    arguments override the matching config fields.

    Construction never performs network I/O and never fails because of
    the underlying client: if the client cannot be built from the default
    headers (for example a header value that is not ASCII), a warning is
    logged and a client with the library defaults is used instead.

    Redirects are followed by the client, up to ``DEFAULT_MAX_REDIRECTS``
    hops, so ``send`` returns the final response of a redirect chain.

    Args:
        config: Optional fetcher configuration.
        name: Name identifying the fetcher in log messages.
        base_url: The base URL every request path is resolved against.
            Required when ``config`` is not provided.
        headers: Default headers sent with every request.
        timeout: Timeout in seconds applied by httpx to each phase of a
            call (connect, read, write, pool acquisition). Defaults to 60.
        transport: Optional ``httpx`` transport used by the client.

    Raises:
        ValueError: If neither ``config`` nor ``base_url`` is provided,
            or if the timeout is not positive.

    Example:
        ```pycon
        >>> import asyncio
        >>> from netrequest import Fetcher, RequestSpec
        >>> async def main():  # doctest: +SKIP
        ...     async with Fetcher(name="api", base_url="https://api.example.com/v1") as fetcher:
        ...         response = await fetcher.get(RequestSpec(path="/users", query={"page": 1}))
        ...         return response.json()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: FetcherConfig | None = None,
        *,
        name: str | None = None,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            if base_url is None:
                msg = "base_url is required when no config is provided"
                raise ValueError(msg)
            config = FetcherConfig(base_url=base_url)
        self._config = config.merge(name=name, base_url=base_url, headers=headers, timeout=timeout)
        self._client = self._create_client(self._config, transport)
        logger.debug(f"Creating new network request worker instance! Name: {self.name}")

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(name={self.name!r}, base_url={self.base_url!r})"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def config(self) -> FetcherConfig:
        return self._config

    @property
    def name(self) -> str | None:
        return self._config.name

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def is_closed(self) -> bool:
        """``True`` once the underlying client has been closed."""
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying client and release pooled connections."""
        await self._client.aclose()

    def resolve_url(self, path: str) -> str:
        """Return the absolute URL of ``path`` relative to the base URL.

        Example:
            ```pycon
            >>> from netrequest import Fetcher
            >>> fetcher = Fetcher(base_url="https://api.example.com/")
            >>> fetcher.resolve_url("/v1/ping")
            'https://api.example.com/v1/ping'

            ```
        """
        return resolve_url(self._config.base_url, path)

    async def send(self, spec: RequestSpec) -> httpx.Response:
        r"""Send the request described by ``spec``.

        The per-request headers are overlaid on the client's default
        headers for this call only. A bearer token is sent as an
        ``Authorization`` header, the body is serialized as JSON and the
        query object is encoded as URL query parameters.

        The response is returned whatever its status code; callers are
        responsible for checking it.

        Args:
            spec: The request to send.

        Returns:
            The server's HTTP response.

        Raises:
            httpx.TransportError: If the connection fails, the TLS
                handshake fails, the timeout elapses or the connection is
                reset. The error is neither wrapped nor retried.
        """
        url = self.resolve_url(spec.path)
        headers = httpx.Headers(spec.headers)
        if spec.bearer_auth is not None:
            headers["Authorization"] = f"Bearer {spec.bearer_auth}"

        request = self._client.build_request(
            method=spec.method,
            url=url,
            headers=headers,
            json=spec.body,
            params=spec.query,
        )
        logger.debug(f"[{self.name}] {spec.method} request to {url}")
        return await self._client.send(request)

    @staticmethod
    def _create_client(
        config: FetcherConfig, transport: httpx.AsyncBaseTransport | None
    ) -> httpx.AsyncClient:
        try:
            return httpx.AsyncClient(
                headers=config.headers,
                timeout=config.timeout,
                follow_redirects=True,
                max_redirects=DEFAULT_MAX_REDIRECTS,
                transport=transport,
            )
        except (TypeError, ValueError) as exc:
            logger.warning(
                f"Failed to build HTTP client for {config.name!r} ({exc}), "
                "falling back to library defaults"
            )
            return httpx.AsyncClient(
                follow_redirects=True, max_redirects=DEFAULT_MAX_REDIRECTS, transport=transport
            )

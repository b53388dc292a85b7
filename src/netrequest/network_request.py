r"""Network request facade over a ``Fetcher``.

``NetworkRequest`` builds a ``Fetcher`` whose default headers always
carry a JSON content type, exposes it for issuing raw requests, and
offers a typed ``send`` that reports every failure as an
``ApplicationError``.
"""

from __future__ import annotations

__all__ = ["NetworkRequest"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from netrequest.core.config import DEFAULT_CONTENT_TYPE, DEFAULT_TIMEOUT, FetcherConfig
from netrequest.exceptions import ApplicationError
from netrequest.fetcher import Fetcher

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType
    from typing import Self

    from netrequest.core.config import RequestSpec

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class NetworkRequest:
    r"""Facade owning a ``Fetcher`` configured for JSON APIs.

    ``Content-Type: application/json`` is added to the default headers
    unless the caller already supplied a content type, in which case the
    caller's value is kept. Header names are compared case-insensitively.

    Args:
        name: Name identifying the underlying fetcher in log messages.
        base_url: The base URL every request path is resolved against.
        headers: Optional default headers.
        timeout: Timeout in seconds applied by httpx to each phase of a
            call. Defaults to 60.
        transport: Optional ``httpx`` transport used by the fetcher's client.

    Example:
        ```pycon
        >>> import asyncio
        >>> from netrequest import NetworkRequest, RequestSpec
        >>> async def main():  # doctest: +SKIP
        ...     async with NetworkRequest(name="api", base_url="https://api.example.com") as api:
        ...         response = await api.get_fetcher().get(
        ...             RequestSpec(path="/auth/who-am-i", bearer_auth="token")
        ...         )
        ...         return response.text
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        *,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self.base_url = base_url
        config = FetcherConfig(
            base_url=base_url,
            name=name,
            headers=self._with_default_content_type(headers),
            timeout=timeout,
        )
        self._fetcher = Fetcher(config, transport=transport)

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
    def fetcher(self) -> Fetcher:
        return self._fetcher

    def get_fetcher(self) -> Fetcher:
        """Return the fetcher owned by this facade.

        The facade keeps ownership; closing the facade closes the fetcher.
        """
        return self._fetcher

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    async def send(self, spec: RequestSpec, parser: Callable[[Any], T] | None = None) -> T:
        r"""Send a request and decode its JSON response.

        Args:
            spec: The request to send.
            parser: Optional callable converting the decoded JSON value
                into the desired type, e.g. a pydantic model's
                ``model_validate``. When ``None`` the decoded JSON value
                is returned as is.

        Returns:
            The decoded (and parsed) response body.

        Raises:
            ApplicationError: If the request cannot be built (e.g. a body
                that is not JSON-serializable) or fails at the transport
                level (status code ``0``), if the response status is not 2xx,
                or if the body cannot be decoded or parsed.
        """
        try:
            response = await self._fetcher.send(spec)
        except (httpx.RequestError, TypeError, ValueError) as exc:
            logger.debug(f"[{self.name}] {spec.method} {spec.path} failed: {exc!r}")
            raise ApplicationError(f"network request failed: {exc}", status_code=0) from exc

        if not response.is_success:
            raise ApplicationError(
                f"HTTP error: {response.status_code}",
                status_code=response.status_code,
                payload=_decode_payload(response),
            )

        try:
            data = response.json()
            return data if parser is None else parser(data)
        except (TypeError, ValueError) as exc:
            raise ApplicationError(
                f"failed to parse response JSON: {exc}", status_code=response.status_code
            ) from exc

    @staticmethod
    def _with_default_content_type(headers: Mapping[str, str] | None) -> dict[str, str]:
        merged = dict(headers or {})
        if not any(key.lower() == "content-type" for key in merged):
            merged["Content-Type"] = DEFAULT_CONTENT_TYPE
        return merged


def _decode_payload(response: httpx.Response) -> Any:
    """Return the decoded JSON body of ``response``, or ``None``."""
    try:
        return response.json()
    except ValueError:
        return None

r"""Abstract base class for fetchers."""

from __future__ import annotations

__all__ = ["BaseFetcher"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from netrequest.core.config import RequestSpec


class BaseFetcher(ABC):
    """Abstract base class for fetchers.

    A fetcher dispatches a ``RequestSpec`` and returns the raw response.
    Subclasses implement ``send``; the verb methods force the HTTP method
    and delegate to it, leaving every other field of the spec unchanged.
    """

    @abstractmethod
    async def send(self, spec: RequestSpec) -> httpx.Response:
        """Send the request described by ``spec``.

        Args:
            spec: The request to send.

        Returns:
            The server's HTTP response, whatever its status code.

        Raises:
            httpx.TransportError: If the request could not be completed.
        """

    async def get(self, spec: RequestSpec) -> httpx.Response:
        """Send ``spec`` as a GET request."""
        return await self.send(spec.with_method("GET"))

    async def post(self, spec: RequestSpec) -> httpx.Response:
        """Send ``spec`` as a POST request."""
        return await self.send(spec.with_method("POST"))

    async def put(self, spec: RequestSpec) -> httpx.Response:
        """Send ``spec`` as a PUT request."""
        return await self.send(spec.with_method("PUT"))

    async def patch(self, spec: RequestSpec) -> httpx.Response:
        """Send ``spec`` as a PATCH request."""
        return await self.send(spec.with_method("PATCH"))

    async def delete(self, spec: RequestSpec) -> httpx.Response:
        """Send ``spec`` as a DELETE request."""
        return await self.send(spec.with_method("DELETE"))

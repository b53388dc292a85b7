r"""Configuration dataclasses and defaults for fetchers and requests.

This module provides the configuration constants, the immutable
``FetcherConfig`` owned by a ``Fetcher``, and the per-call
``RequestSpec`` consumed by ``Fetcher.send``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_TIMEOUT",
    "SUPPORTED_METHODS",
    "FetcherConfig",
    "RequestSpec",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from netrequest.core.validation import SUPPORTED_METHODS, validate_method, validate_timeout

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


# Default timeout in seconds, applied to every call issued by a fetcher
DEFAULT_TIMEOUT = 60.0

# Maximum number of redirect hops followed by a fetcher's client
DEFAULT_MAX_REDIRECTS = 10

# Content type added by NetworkRequest when the caller did not set one
DEFAULT_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class FetcherConfig:
    """Configuration of a ``Fetcher``.

    The configuration is immutable after construction. The header mapping
    is copied so later changes to the caller's mapping are not observed.
    Only ``base_url`` and ``name`` take part in the hash, since the
    headers are stored as a ``dict`` and ``httpx.Timeout`` is unhashable.

    Args:
        base_url: The base URL every request path is resolved against.
            It is not validated.
        name: Optional name identifying the fetcher in log messages.
        headers: Default headers sent with every request. When a key
            appears several times the last value wins.
        timeout: Timeout in seconds applied by httpx to each phase of a
            call (connect, read, write, pool acquisition). Must be > 0.

    Example:
        ```pycon
        >>> from netrequest.core.config import FetcherConfig
        >>> config = FetcherConfig(base_url="https://api.example.com", name="api")
        >>> config.timeout
        60.0
        >>> config.merge(timeout=5.0).timeout
        5.0
        >>> config.timeout  # Original unchanged
        60.0

        ```
    """

    base_url: str
    name: str | None = None
    headers: dict[str, str] = field(default_factory=dict, hash=False)
    timeout: float | httpx.Timeout = field(default=DEFAULT_TIMEOUT, hash=False)

    def __post_init__(self) -> None:
        validate_timeout(self.timeout)
        object.__setattr__(self, "headers", dict(self.headers or {}))

    def merge(self, **overrides: Any) -> FetcherConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new FetcherConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


@dataclass(frozen=True)
class RequestSpec:
    """Description of a single request issued through a ``Fetcher``.

    Args:
        path: Path relative to the fetcher's base URL.
        method: HTTP method, one of ``SUPPORTED_METHODS``. Case-insensitive.
        headers: Optional headers overlaid on the fetcher's default headers
            for this call only.
        bearer_auth: Optional token sent as ``Authorization: Bearer <token>``.
        body: Optional JSON-serializable request body.
        query: Optional JSON-serializable query object, encoded as URL
            query parameters.

    Example:
        ```pycon
        >>> from netrequest.core.config import RequestSpec
        >>> spec = RequestSpec(path="/users", query={"page": 2})
        >>> spec.method
        'GET'
        >>> spec.with_method("post").method
        'POST'

        ```
    """

    path: str
    method: str = "GET"
    headers: Mapping[str, str] | None = field(default=None, hash=False)
    bearer_auth: str | None = None
    body: Any = field(default=None, hash=False)
    query: Any = field(default=None, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", validate_method(self.method))

    def with_method(self, method: str) -> RequestSpec:
        """Return a copy of this spec with only the method replaced."""
        return replace(self, method=method)

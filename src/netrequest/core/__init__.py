r"""Core configuration, validation and URL logic shared by the fetcher
and the network request facade."""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_TIMEOUT",
    "SUPPORTED_METHODS",
    "FetcherConfig",
    "RequestSpec",
    "resolve_url",
    "validate_method",
    "validate_timeout",
]

from netrequest.core.config import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT,
    SUPPORTED_METHODS,
    FetcherConfig,
    RequestSpec,
)
from netrequest.core.url import resolve_url
from netrequest.core.validation import validate_method, validate_timeout

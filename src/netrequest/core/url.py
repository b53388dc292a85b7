r"""URL helpers for joining a base URL with a request path."""

from __future__ import annotations

__all__ = ["resolve_url"]


def resolve_url(base_url: str, path: str) -> str:
    """Join a base URL and a request path with exactly one slash.

    Trailing slashes of ``base_url`` and leading slashes of ``path`` are
    trimmed before joining, so the result never contains a doubled or
    missing separator at the join point.

    Args:
        base_url: The base URL, e.g. ``"https://api.example.com/v1/"``.
        path: The request path relative to the base URL.

    Returns:
        The absolute request URL.

    Example:
        ```pycon
        >>> from netrequest.core.url import resolve_url
        >>> resolve_url("https://api.example.com/", "/v1/ping")
        'https://api.example.com/v1/ping'
        >>> resolve_url("https://api.example.com", "v1/ping")
        'https://api.example.com/v1/ping'

        ```
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"

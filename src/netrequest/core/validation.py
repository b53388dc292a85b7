r"""Parameter validation utilities for fetcher configuration and request
specifications."""

from __future__ import annotations

__all__ = ["SUPPORTED_METHODS", "validate_method", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from netrequest.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_method(method: str) -> str:
    """Validate an HTTP method name and return its canonical form.

    Args:
        method: The HTTP method name. Case-insensitive.

    Returns:
        The upper-cased method name.

    Raises:
        ValueError: If the method is not one of ``SUPPORTED_METHODS``.

    Example:
        ```pycon
        >>> from netrequest.core.validation import validate_method
        >>> validate_method("get")
        'GET'
        >>> validate_method("TRACE")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: method must be one of ('GET', 'POST', 'PUT', 'PATCH', 'DELETE'), got 'TRACE'

        ```
    """
    canonical = method.upper()
    if canonical not in SUPPORTED_METHODS:
        msg = f"method must be one of {SUPPORTED_METHODS}, got {method!r}"
        raise ValueError(msg)
    return canonical

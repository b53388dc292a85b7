r"""Exceptions raised by the network request helpers.

Two families of errors exist:

- ``TransportError``: connection, TLS, timeout and protocol failures
  raised by ``httpx``. ``Fetcher`` never wraps or retries them.
- ``ApplicationError``: the uniform error produced by
  ``NetworkRequest.send`` for transport failures, non-success HTTP
  statuses and undecodable response bodies.
"""

from __future__ import annotations

__all__ = ["DEFAULT_ERROR_STATUS_CODE", "ApplicationError", "TransportError"]

from typing import Any

import httpx

TransportError = httpx.TransportError

# Status code used when an ApplicationError is created without one
DEFAULT_ERROR_STATUS_CODE = 400


class ApplicationError(Exception):
    """Structured application-level error.

    Args:
        message: Human-readable description of the error.
        status_code: HTTP status code associated with the error.
            ``0`` is used when no response was received.
        message_code: Optional machine-readable message code.
        payload: Optional JSON-serializable details, e.g. the decoded
            body of an error response.

    Example:
        ```pycon
        >>> from netrequest.exceptions import ApplicationError
        >>> err = ApplicationError("HTTP error: 404", status_code=404)
        >>> str(err)
        'ApplicationError [404]: HTTP error: 404'
        >>> err.to_dict()
        {'statusCode': 404, 'messageCode': None, 'message': 'HTTP error: 404', 'payload': None}

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        message_code: str | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = DEFAULT_ERROR_STATUS_CODE if status_code is None else status_code
        self.message_code = message_code
        self.payload = payload

    def __str__(self) -> str:
        return f"ApplicationError [{self.status_code}]: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error with camelCase keys.

        Returns:
            A dictionary with the ``statusCode``, ``messageCode``,
            ``message`` and ``payload`` keys.
        """
        return {
            "statusCode": self.status_code,
            "messageCode": self.message_code,
            "message": self.message,
            "payload": self.payload,
        }

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the phastly client library.

All exceptions inherit from PhastlyError, making it easy to catch every
library error with a single except clause. Responses that carry a body that
is not valid JSON raise json.JSONDecodeError unchanged.
"""

from typing import Any


class PhastlyError(Exception):
    """Base exception for all phastly errors.

    Example:
        try:
            await client.purge_all(service_id)
        except PhastlyError as e:
            logger.error(f"Fastly call failed: {e}")
    """

    pass


class ConfigurationError(PhastlyError):
    """Raised when a request cannot be built from the current configuration.

    Raised before any network I/O takes place. Common causes include:
    - No API key has been set (environment or set_api_key())
    - Neither a base URL nor an endpoint was supplied
    - Invalid configuration values (non-positive timeout, bad URL scheme)

    Example:
        try:
            await client.list_services()
        except ConfigurationError:
            client.set_api_key(os.environ["FASTLY_API_KEY"])
    """

    pass


class RequestFailedError(PhastlyError):
    """Raised when the API answered with an empty body.

    The message embeds a JSON description of the attempted request with the
    credential redacted.

    Attributes:
        method: HTTP method of the failed request.
        url: Fully resolved URL of the failed request.
        status_code: HTTP status code of the response, if one was received.
        request: Redacted description of the request (method, url, headers,
            form, params, timeout_ms).
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        request: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.request = request or {}


class TransportError(PhastlyError):
    """Raised when the request never produced a response.

    Wraps DNS, connection, TLS and protocol failures raised by httpx. The
    original exception is available as ``__cause__``.

    Attributes:
        method: HTTP method of the attempted request.
        url: Fully resolved URL of the attempted request.
        request: Redacted description of the request.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        request: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.request = request or {}


class RequestTimeoutError(TransportError):
    """Raised when a request exceeds its configured timeout."""

    pass


__all__ = [
    "ConfigurationError",
    "PhastlyError",
    "RequestFailedError",
    "RequestTimeoutError",
    "TransportError",
]

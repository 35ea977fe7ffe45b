# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request dispatch for the Fastly API.

Every endpoint helper funnels through Dispatcher.dispatch(), which:

1. Refuses to run without an API key or without a target URL
2. Merges the default headers (Fastly-Key, Accept, User-Agent) with caller
   overrides, caller values winning
3. Performs exactly one HTTP request with the configured timeout
4. Decodes the response body as JSON

Empty bodies raise RequestFailedError, network failures raise
TransportError and unparseable URLs raise ConfigurationError. All carry
a description of the request in which the credential has been redacted.
Invalid JSON raises json.JSONDecodeError.
"""

import asyncio
import json
import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx
from typing_extensions import Self

from .config import AUTH_HEADER, ClientConfig
from .exceptions import (
    ConfigurationError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)
from .observability.metrics import (
    OUTCOME_DECODE_ERROR,
    OUTCOME_EMPTY_RESPONSE,
    OUTCOME_SUCCESS,
    OUTCOME_TIMEOUT,
    OUTCOME_TRANSPORT_ERROR,
    RequestMetrics,
    get_prometheus_request_metrics,
)
from .types.request import RequestDescriptor

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"


def merge_headers(
    defaults: Mapping[str, Any], overrides: Mapping[str, Any] | None = None
) -> dict[str, str]:
    """
    Merge header overrides over defaults.

    Defaults are applied first, then overrides in iteration order. Header
    names compare case-insensitively; on a collision the override's name and
    value replace the earlier entry. Values are coerced to str.

    Args:
        defaults: Default headers
        overrides: Caller-supplied headers

    Returns:
        A new dict with the merged headers
    """
    merged: dict[str, str] = {}
    for source in (defaults, overrides or {}):
        for name, value in source.items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = str(value)
    return merged


def redact_headers(
    headers: Mapping[str, str], credential: str | None = None
) -> dict[str, str]:
    """
    Return a copy of headers that is safe to log.

    The Fastly-Key header is always masked. Any other header whose value
    contains the credential, such as "Bearer <key>", is masked as well.
    """
    redacted: dict[str, str] = {}
    for name, value in headers.items():
        is_auth = name.lower() == AUTH_HEADER.lower()
        if is_auth or (credential and credential in value):
            redacted[name] = REDACTED
        else:
            redacted[name] = value
    return redacted


def describe_request(
    method: str,
    url: str,
    headers: Mapping[str, str],
    form: Mapping[str, Any] | None = None,
    params: Mapping[str, Any] | None = None,
    timeout_ms: int | None = None,
    credential: str | None = None,
) -> dict[str, Any]:
    """Build a redacted description of a request for errors and logs."""
    description: dict[str, Any] = {
        "method": method,
        "url": url,
        "headers": redact_headers(headers, credential),
        "timeout_ms": timeout_ms,
    }
    if form:
        description["form"] = dict(form)
    if params:
        description["params"] = dict(params)
    return description


def resolve_url(
    base_url: str | None, endpoint: str | None, default_base_url: str
) -> str:
    """
    Resolve the target URL of a request.

    An explicit base_url with an empty endpoint targets exactly base_url,
    which is how single-URL purges address the cached object. Without a
    base_url the endpoint is joined onto default_base_url.

    Raises:
        ConfigurationError: If no endpoint is given and no base_url either,
            which would otherwise hit the API root.
    """
    path = (endpoint or "").lstrip("/")

    if not base_url:
        if not path:
            raise ConfigurationError("missing base_url and/or endpoint")
        base_url = default_base_url

    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path}"


class Dispatcher:
    """
    Performs single-attempt requests against the Fastly API.

    The dispatcher owns a lazily created httpx.AsyncClient unless one is
    passed in, in which case closing it is left to the caller. The API key
    is read from the config at call time, so updating it affects every
    subsequent request.

    There are no retries: each dispatch() is one request with one outcome.

    Example:
        >>> async with Dispatcher(ClientConfig(api_key="...")) as dispatcher:
        ...     services = await dispatcher.send("service")
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        metrics: RequestMetrics | None = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            config: Client configuration (credential, base URL, timeout)
            http_client: Optional pre-built client. Not closed by aclose().
            transport: Optional httpx transport for the owned client, mainly
                httpx.MockTransport in tests
            metrics: Optional shared RequestMetrics instance
        """
        self.config = config
        self.metrics = metrics if metrics is not None else RequestMetrics()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._transport = transport
        self._http_client_loop: asyncio.AbstractEventLoop | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        """
        Return the HTTP client, building an owned one on first use.

        Pooled connections belong to the event loop that opened them, so an
        owned client created under an earlier loop (e.g. a previous
        asyncio.run()) is discarded and rebuilt for the running loop.
        """
        loop = asyncio.get_running_loop()
        if (
            self._owns_http_client
            and self._http_client is not None
            and self._http_client_loop is not loop
        ):
            logger.debug("Event loop changed; rebuilding owned HTTP client")
            self._http_client = None
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(transport=self._transport)
            self._http_client_loop = loop
        return self._http_client

    def default_headers(self, api_key: str) -> dict[str, str]:
        """Headers sent with every request before caller overrides."""
        return {
            AUTH_HEADER: api_key,
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """
        Perform one request and return the decoded JSON body.

        Args:
            descriptor: Description of the request

        Returns:
            The JSON-decoded response body

        Raises:
            ConfigurationError: No API key, no URL to target, or an invalid URL
            RequestTimeoutError: The request exceeded its timeout
            TransportError: The request failed before a response arrived
            RequestFailedError: The response body was empty
            json.JSONDecodeError: The response body was not valid JSON
        """
        api_key = self.config.api_key
        if not api_key:
            raise ConfigurationError(
                "Missing Fastly API key: set FASTLY_API_KEY or call set_api_key()"
            )

        url = resolve_url(descriptor.base_url, descriptor.endpoint, self.config.base_url)
        headers = merge_headers(self.default_headers(api_key), descriptor.headers)
        timeout_ms = descriptor.timeout_ms or self.config.timeout_ms
        method = descriptor.method

        logger.debug(f"Dispatching {method} {url}")

        started = time.monotonic()
        try:
            response = await self._get_http_client().request(
                method,
                url,
                headers=headers,
                data=descriptor.form,
                params=descriptor.params,
                timeout=timeout_ms / 1000,
            )
        except httpx.InvalidURL as e:
            description = self._describe(descriptor, url, headers, timeout_ms, api_key)
            raise ConfigurationError(
                f"invalid request URL ({e}) with options: "
                f"{json.dumps(description, default=str)}"
            ) from e
        except httpx.TimeoutException as e:
            self._record(method, OUTCOME_TIMEOUT, started)
            description = self._describe(descriptor, url, headers, timeout_ms, api_key)
            logger.warning(f"{method} {url} timed out after {timeout_ms}ms")
            raise RequestTimeoutError(
                f"request timed out after {timeout_ms}ms with options: "
                f"{json.dumps(description, default=str)}",
                method=method,
                url=url,
                request=description,
            ) from e
        except httpx.TransportError as e:
            self._record(method, OUTCOME_TRANSPORT_ERROR, started)
            description = self._describe(descriptor, url, headers, timeout_ms, api_key)
            logger.warning(f"{method} {url} failed: {type(e).__name__}")
            raise TransportError(
                f"request failed ({type(e).__name__}) with options: "
                f"{json.dumps(description, default=str)}",
                method=method,
                url=url,
                request=description,
            ) from e

        logger.debug(
            f"{method} {url} -> {response.status_code} "
            f"in {time.monotonic() - started:.3f}s"
        )

        body = response.text
        if not body:
            self._record(method, OUTCOME_EMPTY_RESPONSE, started)
            description = self._describe(descriptor, url, headers, timeout_ms, api_key)
            logger.warning(
                f"{method} {url} returned an empty body (status {response.status_code})"
            )
            raise RequestFailedError(
                "request failed with options: "
                f"{json.dumps(description, default=str)}",
                method=method,
                url=url,
                status_code=response.status_code,
                request=description,
            )

        try:
            result = json.loads(body)
        except json.JSONDecodeError:
            self._record(method, OUTCOME_DECODE_ERROR, started)
            raise

        self._record(method, OUTCOME_SUCCESS, started)
        return result

    async def send(
        self,
        endpoint: str = "",
        *,
        method: str = "GET",
        base_url: str | None = None,
        headers: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """
        Build a RequestDescriptor from keyword arguments and dispatch it.

        This is the raw entry point for endpoints that have no helper yet.
        """
        descriptor = RequestDescriptor(
            endpoint=endpoint,
            method=method,
            base_url=base_url,
            headers=dict(headers or {}),
            form=form,
            params=params,
            timeout_ms=timeout_ms,
        )
        return await self.dispatch(descriptor)

    def _describe(
        self,
        descriptor: RequestDescriptor,
        url: str,
        headers: Mapping[str, str],
        timeout_ms: int,
        api_key: str,
    ) -> dict[str, Any]:
        return describe_request(
            descriptor.method,
            url,
            headers,
            form=descriptor.form,
            params=descriptor.params,
            timeout_ms=timeout_ms,
            credential=api_key,
        )

    def _record(self, method: str, outcome: str, started: float) -> None:
        self.metrics.record(method, outcome)
        if self.config.metrics_enabled:
            prom_metrics = get_prometheus_request_metrics()
            if prom_metrics:
                prom_metrics.observe(method, outcome, time.monotonic() - started)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this dispatcher created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None
            self._http_client_loop = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()


__all__ = [
    "REDACTED",
    "Dispatcher",
    "describe_request",
    "merge_headers",
    "redact_headers",
    "resolve_url",
]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""phastly - Async client for the Fastly administrative API.

This library wraps a subset of the Fastly API: services, versions, backends,
domains, settings and cache purges. Every helper issues a single request
through one dispatcher that adds authentication, merges headers and decodes
the JSON response.

Key Features:
    - Async helpers for ~40 endpoints, plus a raw send() for the rest
    - Client instances with their own credentials, or a process-wide default
    - Typed pydantic parameter models for request bodies
    - Credentials redacted from every error message and log line
    - Optional Prometheus request metrics

Quick Start:
    >>> from phastly import FastlyClient
    >>>
    >>> async with FastlyClient(api_key="...") as fastly:
    ...     service = await fastly.create_service("my-service")
    ...     await fastly.purge_url("https://example.com/x", soft=True)

Or, using FASTLY_API_KEY and the default client:
    >>> import phastly
    >>> await phastly.purge_all("SU1Z0isxPaozGVKXdv0eY")

Note: Prometheus metrics require the 'metrics' extra. Install with:
    pip install phastly[metrics]

Version: 1.0.0
"""

__version__ = "1.0.0"

from typing import Any

from .client import FastlyClient
from .config import (
    API_KEY_ENV_VAR,
    AUTH_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    SOFT_PURGE_HEADER,
    ClientConfig,
)
from .default import (
    CLIENT_METHODS,
    aclose_default_client,
    get_default_client,
    reset_default_client,
    set_api_key,
)
from .dispatcher import Dispatcher, merge_headers, redact_headers, resolve_url
from .endpoints import filter_active_version
from .exceptions import (
    ConfigurationError,
    PhastlyError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)
from .observability import PrometheusRequestMetrics, RequestMetrics
from .protocols import DispatcherProtocol
from .types import (
    BackendParams,
    BackendUpdate,
    DomainParams,
    RequestDescriptor,
    RequestSettingsParams,
    ServiceUpdate,
    SettingsParams,
    VersionUpdate,
)

__all__ = [
    "API_KEY_ENV_VAR",
    "AUTH_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "SOFT_PURGE_HEADER",
    # Parameter models
    "BackendParams",
    "BackendUpdate",
    # Configuration
    "ClientConfig",
    "ConfigurationError",
    # Dispatch
    "Dispatcher",
    "DispatcherProtocol",
    "DomainParams",
    # Client
    "FastlyClient",
    # Exceptions
    "PhastlyError",
    "PrometheusRequestMetrics",
    "RequestDescriptor",
    "RequestFailedError",
    # Observability
    "RequestMetrics",
    "RequestSettingsParams",
    "RequestTimeoutError",
    "ServiceUpdate",
    "SettingsParams",
    "TransportError",
    "VersionUpdate",
    # Default client
    "aclose_default_client",
    "filter_active_version",
    "get_default_client",
    "merge_headers",
    "redact_headers",
    "reset_default_client",
    "resolve_url",
    "set_api_key",
]


def __getattr__(name: str) -> Any:
    """Resolve endpoint helpers against the default client."""
    if name in CLIENT_METHODS:
        return getattr(get_default_client(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

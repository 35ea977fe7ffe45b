# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Process-wide default client.

For scripts that talk to a single Fastly account, this module keeps one
FastlyClient built from the environment and exposes its helpers as module
attributes:

    >>> from phastly import default as fastly
    >>> fastly.set_api_key("...")
    >>> service = await fastly.create_service("my-service")

The API key is read from FASTLY_API_KEY when the default client is first
created and can be replaced at any time with set_api_key(). Concurrent
updates of the key while requests are in flight are not synchronized.
"""

import logging
import threading
from typing import Any

from .client import FastlyClient
from .endpoints.versions import filter_active_version

logger = logging.getLogger(__name__)

# Client methods exposed as module attributes
CLIENT_METHODS = frozenset(
    {
        "activate_version",
        "check_all_domains",
        "clone_version",
        "create_backend",
        "create_domain",
        "create_request_settings",
        "create_service",
        "create_service_version",
        "deactivate_version",
        "delete_backend",
        "delete_domain",
        "delete_service",
        "dispatch",
        "get_active_version",
        "get_backend",
        "get_domain",
        "get_service",
        "get_service_by_name",
        "get_service_details",
        "get_settings",
        "get_version",
        "list_backends",
        "list_domains",
        "list_request_settings",
        "list_services",
        "list_version_domains",
        "list_versions",
        "lock_version",
        "purge_all",
        "purge_key",
        "purge_url",
        "rename_service",
        "send",
        "update_backend",
        "update_service",
        "update_service_version",
        "update_settings",
        "validate_service_version",
    }
)

_default_client: FastlyClient | None = None
_default_lock = threading.Lock()


def get_default_client() -> FastlyClient:
    """Get or create the default client, configured from the environment."""
    global _default_client

    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = FastlyClient.from_env()
                logger.debug("Created default Fastly client from environment")

    return _default_client


def set_api_key(api_key: str | None) -> None:
    """Set or replace the API key of the default client."""
    get_default_client().set_api_key(api_key)


def reset_default_client() -> None:
    """Drop the default client without closing it (mainly for testing)."""
    global _default_client
    _default_client = None


async def aclose_default_client() -> None:
    """Close and drop the default client."""
    global _default_client
    client, _default_client = _default_client, None
    if client is not None:
        await client.aclose()


def __getattr__(name: str) -> Any:
    """Resolve endpoint helpers against the current default client."""
    if name in CLIENT_METHODS:
        return getattr(get_default_client(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CLIENT_METHODS",
    "aclose_default_client",
    "filter_active_version",
    "get_default_client",
    "reset_default_client",
    "set_api_key",
]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for phastly.

This module holds the constants of the Fastly API surface and the
ClientConfig dataclass that carries the credential, base URL and timeout
used by a client instance.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.fastly.com"
DEFAULT_TIMEOUT_MS = 5000

AUTH_HEADER = "Fastly-Key"
SOFT_PURGE_HEADER = "Fastly-Soft-Purge"

API_KEY_ENV_VAR = "FASTLY_API_KEY"
BASE_URL_ENV_VAR = "FASTLY_API_URL"
TIMEOUT_ENV_VAR = "FASTLY_TIMEOUT_MS"

VERSION = "1.0.0"


@dataclass
class ClientConfig:
    """
    Configuration for a Fastly API client.

    The API key may be left unset at construction time. Its absence is only
    reported when a request is dispatched, so a client can be created early
    and given its credential later via set_api_key().
    """

    api_key: str | None = None
    """Fastly API token, sent in the Fastly-Key header."""

    base_url: str = DEFAULT_BASE_URL
    """Root URL that endpoint paths are joined onto."""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    """Per-request timeout in milliseconds."""

    user_agent: str = f"phastly/{VERSION}"
    """User-Agent default header. Caller headers still take precedence."""

    metrics_enabled: bool = False
    """Record Prometheus metrics when prometheus_client is installed."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout_ms <= 0:
            raise ConfigurationError("timeout_ms must be positive")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must start with http:// or https://, got {self.base_url!r}"
            )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Reads FASTLY_API_KEY, and optionally FASTLY_API_URL and
        FASTLY_TIMEOUT_MS. A missing API key is not an error here.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If FASTLY_TIMEOUT_MS is not an integer.
        """
        env = os.environ if environ is None else environ

        timeout_ms = DEFAULT_TIMEOUT_MS
        raw_timeout = env.get(TIMEOUT_ENV_VAR)
        if raw_timeout:
            try:
                timeout_ms = int(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV_VAR} must be an integer, got {raw_timeout!r}"
                ) from e

        return cls(
            api_key=env.get(API_KEY_ENV_VAR) or None,
            base_url=env.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL,
            timeout_ms=timeout_ms,
        )


__all__ = [
    "API_KEY_ENV_VAR",
    "AUTH_HEADER",
    "BASE_URL_ENV_VAR",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "SOFT_PURGE_HEADER",
    "TIMEOUT_ENV_VAR",
    "VERSION",
    "ClientConfig",
]

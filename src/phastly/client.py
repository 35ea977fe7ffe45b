# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
FastlyClient: the credential-holding client that exposes every endpoint helper.

Each client carries its own configuration, so several clients with different
API keys can be used side by side in one process.
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

import httpx
from typing_extensions import Self

from .config import ClientConfig
from .dispatcher import Dispatcher
from .endpoints import (
    BackendEndpoints,
    DomainEndpoints,
    PurgeEndpoints,
    ServiceEndpoints,
    SettingsEndpoints,
    VersionEndpoints,
)
from .observability.metrics import RequestMetrics
from .types.request import RequestDescriptor

logger = logging.getLogger(__name__)


class FastlyClient(
    PurgeEndpoints,
    ServiceEndpoints,
    VersionEndpoints,
    BackendEndpoints,
    DomainEndpoints,
    SettingsEndpoints,
):
    """
    Client for the Fastly administrative API.

    Example:
        >>> async with FastlyClient(api_key="...") as fastly:
        ...     service = await fastly.create_service("my-service")
        ...     await fastly.purge_all(service["id"])
    """

    dispatcher: Dispatcher

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        metrics: RequestMetrics | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Fastly API key. Overrides config.api_key when given.
            config: Client configuration. Copied, so set_api_key() never
                affects other clients built from the same config.
            http_client: Optional pre-built httpx.AsyncClient (not closed by aclose())
            transport: Optional httpx transport for the owned client
            metrics: Optional shared RequestMetrics instance
        """
        base = config if config is not None else ClientConfig()
        self.config = replace(
            base, api_key=api_key if api_key is not None else base.api_key
        )
        self.dispatcher = Dispatcher(
            self.config,
            http_client=http_client,
            transport=transport,
            metrics=metrics,
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> Self:
        """Create a client configured from FASTLY_* environment variables."""
        return cls(config=ClientConfig.from_env(environ), **kwargs)

    @property
    def metrics(self) -> RequestMetrics:
        return self.dispatcher.metrics

    def set_api_key(self, api_key: str | None) -> None:
        """Replace the API key used by subsequent requests."""
        self.config.api_key = api_key
        logger.debug("Fastly API key updated")

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """Perform a raw request described by a RequestDescriptor."""
        return await self.dispatcher.dispatch(descriptor)

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
        Perform a raw request, for endpoints that have no helper.

        Example:
            >>> await fastly.send("service/abc/version/3/gzip", method="POST",
            ...                   form={"name": "gzip"})
        """
        return await self.dispatcher.send(
            endpoint,
            method=method,
            base_url=base_url,
            headers=headers,
            form=form,
            params=params,
            timeout_ms=timeout_ms,
        )

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()


__all__ = ["FastlyClient"]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Cache purge endpoints."""

from typing import Any

from ..config import SOFT_PURGE_HEADER
from .base import EndpointMixin, service_path


def purge_headers(soft: bool) -> dict[str, str]:
    """Headers for a purge request. Soft purges mark content stale instead."""
    return {SOFT_PURGE_HEADER: "1"} if soft else {}


class PurgeEndpoints(EndpointMixin):
    """Purging cached content by URL, surrogate key, or service."""

    async def purge_url(self, url: str, soft: bool = False) -> Any:
        """
        Purge a single URL from the cache.

        The PURGE request goes to the URL itself; no API path is appended.

        Args:
            url: Fully qualified URL of the cached object
            soft: Mark the object stale instead of evicting it
        """
        return await self._send(method="PURGE", base_url=url, headers=purge_headers(soft))

    async def purge_key(self, service_id: str, key: str, soft: bool = False) -> Any:
        """
        Purge every object tagged with a surrogate key.

        Args:
            service_id: Service the key belongs to
            key: Surrogate key
            soft: Mark the objects stale instead of evicting them
        """
        return await self._send(
            service_path(service_id, "purge", key),
            method="POST",
            headers=purge_headers(soft),
        )

    async def purge_all(self, service_id: str) -> Any:
        """Purge everything cached for a service."""
        return await self._send(service_path(service_id, "purge_all"), method="POST")

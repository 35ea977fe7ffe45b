# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Version settings and request settings endpoints."""

from collections.abc import Mapping
from typing import Any

from ..types.params import RequestSettingsParams, SettingsParams, to_form
from .base import EndpointMixin, version_path


class SettingsEndpoints(EndpointMixin):
    """Default settings and request settings of a service version."""

    async def get_settings(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version, "settings"))

    async def update_settings(
        self,
        service_id: str,
        version: int | str,
        params: SettingsParams | Mapping[str, Any],
    ) -> Any:
        """Update default host, TTL and stale-if-error settings."""
        return await self._send(
            version_path(service_id, version, "settings"),
            method="PUT",
            form=to_form(params),
        )

    async def list_request_settings(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version, "request_settings"))

    async def create_request_settings(
        self,
        service_id: str,
        version: int | str,
        params: RequestSettingsParams | Mapping[str, Any],
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "request_settings"),
            method="POST",
            form=to_form(params),
        )

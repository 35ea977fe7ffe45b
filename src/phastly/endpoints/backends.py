# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Backend (origin) endpoints."""

from collections.abc import Mapping
from typing import Any

from ..types.params import BackendParams, BackendUpdate, to_form
from .base import EndpointMixin, version_path


class BackendEndpoints(EndpointMixin):
    """Managing the backends of a service version."""

    async def list_backends(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version, "backend"))

    async def get_backend(self, service_id: str, version: int | str, name: str) -> Any:
        return await self._send(version_path(service_id, version, "backend", name))

    async def create_backend(
        self,
        service_id: str,
        version: int | str,
        params: BackendParams | Mapping[str, Any],
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "backend"),
            method="POST",
            form=to_form(params),
        )

    async def update_backend(
        self,
        service_id: str,
        version: int | str,
        name: str,
        params: BackendUpdate | Mapping[str, Any],
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "backend", name),
            method="PUT",
            form=to_form(params),
        )

    async def delete_backend(
        self, service_id: str, version: int | str, name: str
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "backend", name), method="DELETE"
        )

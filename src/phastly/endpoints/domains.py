# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Domain endpoints scoped to a service version."""

from collections.abc import Mapping
from typing import Any

from ..types.params import DomainParams, to_form
from .base import EndpointMixin, version_path


class DomainEndpoints(EndpointMixin):
    """Managing the domains of a service version."""

    async def list_version_domains(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version, "domain"))

    async def get_domain(self, service_id: str, version: int | str, name: str) -> Any:
        return await self._send(version_path(service_id, version, "domain", name))

    async def create_domain(
        self,
        service_id: str,
        version: int | str,
        params: DomainParams | Mapping[str, Any],
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "domain"),
            method="POST",
            form=to_form(params),
        )

    async def delete_domain(
        self, service_id: str, version: int | str, name: str
    ) -> Any:
        return await self._send(
            version_path(service_id, version, "domain", name), method="DELETE"
        )

    async def check_all_domains(self, service_id: str, version: int | str) -> Any:
        """Check the DNS of every domain of a version."""
        return await self._send(version_path(service_id, version, "domain", "check_all"))

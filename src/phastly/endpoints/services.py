# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Service endpoints."""

from collections.abc import Mapping
from typing import Any

from ..types.params import ServiceUpdate, to_form
from .base import EndpointMixin, service_path


class ServiceEndpoints(EndpointMixin):
    """Creating, inspecting, renaming and deleting services."""

    async def create_service(self, name: str, comment: str | None = None) -> Any:
        """Create a service. Returns the new service (id, name, versions...)."""
        return await self._send(
            "service",
            method="POST",
            form=to_form({"name": name, "comment": comment}),
        )

    async def update_service(
        self, service_id: str, params: ServiceUpdate | Mapping[str, Any]
    ) -> Any:
        return await self._send(
            service_path(service_id), method="PUT", form=to_form(params)
        )

    async def rename_service(self, service_id: str, new_name: str) -> Any:
        return await self.update_service(service_id, ServiceUpdate(name=new_name))

    async def delete_service(self, service_id: str) -> Any:
        return await self._send(service_path(service_id), method="DELETE")

    async def list_services(self) -> Any:
        return await self._send("service")

    async def get_service(self, service_id: str) -> Any:
        return await self._send(service_path(service_id))

    async def get_service_by_name(self, name: str) -> Any:
        """Look a service up by its name. The name is sent as a query parameter."""
        return await self._send("service/search", params={"name": name})

    async def get_service_details(self, service_id: str) -> Any:
        """Get a service with its active and latest version configuration."""
        return await self._send(service_path(service_id, "details"))

    async def list_domains(self, service_id: str) -> Any:
        """List the domains of a service across its versions."""
        return await self._send(service_path(service_id, "domain"))

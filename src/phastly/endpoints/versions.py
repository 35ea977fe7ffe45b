# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Service version endpoints and the active version filter."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..types.params import VersionUpdate, to_form
from .base import EndpointMixin, service_path, version_path


def filter_active_version(
    versions: Iterable[Mapping[str, Any]] | None,
) -> Mapping[str, Any] | None:
    """
    Return the first version record flagged active.

    Only the first match is returned; no check is made that a single version
    is active.

    Args:
        versions: Version records as returned by the API

    Returns:
        The first record whose "active" is True, or None
    """
    for version in versions or ():
        if version.get("active") is True:
            return version
    return None


class VersionEndpoints(EndpointMixin):
    """Creating, validating and (de)activating service versions."""

    async def list_versions(self, service_id: str) -> Any:
        return await self._send(service_path(service_id, "version"))

    async def get_version(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version))

    async def get_active_version(self, service_id: str) -> Mapping[str, Any] | None:
        """Fetch the version list and return the active version, if any."""
        return filter_active_version(await self.list_versions(service_id))

    async def create_service_version(self, service_id: str) -> Any:
        return await self._send(service_path(service_id, "version"), method="POST")

    async def update_service_version(
        self,
        service_id: str,
        version: int | str,
        params: VersionUpdate | Mapping[str, Any],
    ) -> Any:
        return await self._send(
            version_path(service_id, version), method="PUT", form=to_form(params)
        )

    async def validate_service_version(
        self, service_id: str, version: int | str
    ) -> Any:
        """Check a version for configuration errors before activating it."""
        return await self._send(version_path(service_id, version, "validate"))

    async def activate_version(self, service_id: str, version: int | str) -> Any:
        return await self._send(
            version_path(service_id, version, "activate"), method="PUT"
        )

    async def deactivate_version(self, service_id: str, version: int | str) -> Any:
        return await self._send(
            version_path(service_id, version, "deactivate"), method="PUT"
        )

    async def clone_version(self, service_id: str, version: int | str) -> Any:
        """Copy a version into a new, editable version."""
        return await self._send(version_path(service_id, version, "clone"), method="PUT")

    async def lock_version(self, service_id: str, version: int | str) -> Any:
        return await self._send(version_path(service_id, version, "lock"), method="PUT")

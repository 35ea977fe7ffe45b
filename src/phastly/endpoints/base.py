# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Shared plumbing for the endpoint helper mixins."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..protocols.dispatcher import DispatcherProtocol


def segment(value: Any) -> str:
    """Percent-encode one path segment taken from caller data."""
    return quote(str(value), safe="")


def service_path(service_id: str, *parts: Any) -> str:
    """Build "service/<id>/<parts...>", encoding every segment."""
    return "/".join(["service", segment(service_id), *(segment(p) for p in parts)])


def version_path(service_id: str, version: int | str, *parts: Any) -> str:
    """Build "service/<id>/version/<version>/<parts...>"."""
    return service_path(service_id, "version", version, *parts)


class EndpointMixin:
    """
    Base for endpoint helper groups.

    Subclasses call self._send(); the concrete client provides the
    dispatcher through the ``dispatcher`` attribute.
    """

    dispatcher: DispatcherProtocol

    async def _send(
        self,
        endpoint: str = "",
        *,
        method: str = "GET",
        base_url: str | None = None,
        headers: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self.dispatcher.send(
            endpoint,
            method=method,
            base_url=base_url,
            headers=headers,
            form=form,
            params=params,
        )

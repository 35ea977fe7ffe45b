# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for request dispatch."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..types.request import RequestDescriptor


@runtime_checkable
class DispatcherProtocol(Protocol):
    """
    Interface the endpoint helpers build on.

    Any object that can turn a RequestDescriptor into a decoded JSON body can
    back the endpoint helpers, which makes it straightforward to substitute a
    recording or fake dispatcher in tests.
    """

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """Perform one request and return the decoded JSON body."""
        ...

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
        """Build a RequestDescriptor from keyword arguments and dispatch it."""
        ...

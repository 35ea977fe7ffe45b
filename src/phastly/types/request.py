# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request descriptor type.

A RequestDescriptor describes one HTTP call against the Fastly API. It is
built fresh for every call and never mutated afterwards.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Description of a single API request.

    Attributes:
        endpoint: Path relative to the base URL (e.g. "service/abc/purge_all").
            May be empty when base_url names the full target, as for URL purges.
        method: HTTP method. Normalized to upper case.
        base_url: Override for the client's base URL. None uses the client default.
        headers: Header overrides, merged over the default headers.
        form: Parameters sent as an application/x-www-form-urlencoded body.
        params: Parameters sent in the query string.
        timeout_ms: Per-request timeout override in milliseconds.
    """

    endpoint: str = ""
    method: str = "GET"
    base_url: str | None = None
    headers: Mapping[str, Any] = field(default_factory=dict)
    form: Mapping[str, Any] | None = None
    params: Mapping[str, Any] | None = None
    timeout_ms: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ConfigurationError("timeout_ms must be positive")


__all__ = ["RequestDescriptor"]

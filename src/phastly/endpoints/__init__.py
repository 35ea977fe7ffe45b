# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Endpoint helpers for the Fastly API.

Each helper maps its arguments onto a single dispatcher call. The helpers are
grouped into mixins that FastlyClient combines.
"""

from .backends import BackendEndpoints
from .base import EndpointMixin, segment, service_path, version_path
from .domains import DomainEndpoints
from .purge import PurgeEndpoints, purge_headers
from .services import ServiceEndpoints
from .settings import SettingsEndpoints
from .versions import VersionEndpoints, filter_active_version

__all__ = [
    "BackendEndpoints",
    "DomainEndpoints",
    "EndpointMixin",
    "PurgeEndpoints",
    "ServiceEndpoints",
    "SettingsEndpoints",
    "VersionEndpoints",
    "filter_active_version",
    "purge_headers",
    "segment",
    "service_path",
    "version_path",
]

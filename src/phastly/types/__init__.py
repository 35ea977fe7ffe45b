# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions for requests and endpoint parameters."""

from .params import (
    BackendParams,
    BackendUpdate,
    DomainParams,
    FastlyParams,
    RequestSettingsParams,
    ServiceUpdate,
    SettingsParams,
    VersionUpdate,
    encode_form,
    to_form,
)
from .request import RequestDescriptor

__all__ = [
    # Parameter models
    "BackendParams",
    "BackendUpdate",
    "DomainParams",
    "FastlyParams",
    # Request descriptor
    "RequestDescriptor",
    "RequestSettingsParams",
    "ServiceUpdate",
    "SettingsParams",
    "VersionUpdate",
    "encode_form",
    "to_form",
]

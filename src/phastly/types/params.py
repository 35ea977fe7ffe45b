# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Parameter models for Fastly endpoints.

Each model lists the form fields accepted by one family of endpoints. Unset
fields (None) are left out of the request body so the API keeps its own
defaults. Endpoint helpers also accept a plain mapping for fields that are
not modelled here.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FastlyParams(BaseModel):
    """Base class for endpoint parameter models."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_form(self) -> dict[str, str]:
        """Dump set fields as form values, using API field names."""
        return encode_form(self.model_dump(exclude_none=True, by_alias=True))


class BackendParams(FastlyParams):
    """Fields for creating a backend on a service version."""

    name: str
    address: str | None = None
    port: int | None = None
    comment: str | None = None
    hostname: str | None = None
    override_host: str | None = None
    use_ssl: bool | None = None
    ssl_cert_hostname: str | None = None
    ssl_sni_hostname: str | None = None
    connect_timeout: int | None = None
    first_byte_timeout: int | None = None
    between_bytes_timeout: int | None = None
    max_conn: int | None = None
    weight: int | None = None
    auto_loadbalance: bool | None = None
    shield: str | None = None
    request_condition: str | None = None
    healthcheck: str | None = None


class BackendUpdate(BackendParams):
    """Fields for updating a backend. Setting name renames it."""

    name: str | None = None  # type: ignore[assignment]


class ServiceUpdate(FastlyParams):
    """Fields for updating a service."""

    name: str | None = None
    comment: str | None = None
    customer_id: str | None = None


class VersionUpdate(FastlyParams):
    """Fields for updating a service version."""

    comment: str | None = None


class DomainParams(FastlyParams):
    """Fields for adding a domain to a service version."""

    name: str
    comment: str | None = None


class RequestSettingsParams(FastlyParams):
    """Fields for a request settings object."""

    name: str
    action: Literal["lookup", "pass"] | None = None
    default_host: str | None = None
    force_miss: bool | None = None
    force_ssl: bool | None = None
    bypass_busy_wait: bool | None = None
    geo_headers: bool | None = None
    hash_keys: str | None = None
    max_stale_age: int | None = None
    request_condition: str | None = None
    timer_support: bool | None = None
    xff: Literal["clear", "leave", "append", "append_all", "overwrite"] | None = None


class SettingsParams(FastlyParams):
    """Default settings of a service version."""

    default_host: str | None = Field(default=None, alias="general.default_host")
    default_ttl: int | None = Field(default=None, alias="general.default_ttl")
    stale_if_error: bool | None = Field(default=None, alias="general.stale_if_error")
    stale_if_error_ttl: int | None = Field(
        default=None, alias="general.stale_if_error_ttl"
    )


def encode_form(values: Mapping[str, Any]) -> dict[str, str]:
    """Encode a mapping as form values. Booleans become "1" or "0"."""
    form: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "1" if value else "0"
        else:
            form[key] = str(value)
    return form


def to_form(params: FastlyParams | Mapping[str, Any] | None) -> dict[str, str] | None:
    """Convert a parameter model or mapping to form values."""
    if params is None:
        return None
    if isinstance(params, FastlyParams):
        return params.to_form()
    return encode_form(params)


__all__ = [
    "BackendParams",
    "BackendUpdate",
    "DomainParams",
    "FastlyParams",
    "RequestSettingsParams",
    "ServiceUpdate",
    "SettingsParams",
    "VersionUpdate",
    "encode_form",
    "to_form",
]

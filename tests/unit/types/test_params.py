"""Unit tests for the endpoint parameter models."""

import pytest
from pydantic import ValidationError

from phastly.types import (
    BackendParams,
    BackendUpdate,
    DomainParams,
    RequestSettingsParams,
    ServiceUpdate,
    SettingsParams,
    VersionUpdate,
    encode_form,
    to_form,
)


class TestEncodeForm:
    def test_booleans_are_one_and_zero(self):
        assert encode_form({"use_ssl": True, "auto_loadbalance": False}) == {
            "use_ssl": "1",
            "auto_loadbalance": "0",
        }

    def test_numbers_are_strings(self):
        assert encode_form({"port": 443}) == {"port": "443"}

    def test_none_values_are_dropped(self):
        assert encode_form({"name": "a", "comment": None}) == {"name": "a"}


class TestToForm:
    def test_none(self):
        assert to_form(None) is None

    def test_mapping_passthrough(self):
        assert to_form({"name": "origin", "custom_field": 1}) == {
            "name": "origin",
            "custom_field": "1",
        }

    def test_model_excludes_unset_fields(self):
        params = BackendParams(name="origin", address="10.0.0.1", port=80)
        assert to_form(params) == {
            "name": "origin",
            "address": "10.0.0.1",
            "port": "80",
        }


class TestBackendParams:
    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            BackendParams()  # type: ignore[call-arg]

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            BackendParams(name="origin", adress="typo")  # type: ignore[call-arg]

    def test_update_name_is_optional(self):
        assert BackendUpdate(port=8080).to_form() == {"port": "8080"}

    def test_update_can_rename(self):
        assert BackendUpdate(name="new-origin").to_form() == {"name": "new-origin"}


class TestOtherModels:
    def test_service_update(self):
        assert ServiceUpdate(comment="prod").to_form() == {"comment": "prod"}

    def test_version_update(self):
        assert VersionUpdate(comment="v2").to_form() == {"comment": "v2"}

    def test_domain_requires_name(self):
        with pytest.raises(ValidationError):
            DomainParams()  # type: ignore[call-arg]
        assert DomainParams(name="www.example.com").to_form() == {
            "name": "www.example.com"
        }

    def test_request_settings(self):
        params = RequestSettingsParams(name="force-ssl", force_ssl=True, action="pass")
        assert params.to_form() == {
            "name": "force-ssl",
            "force_ssl": "1",
            "action": "pass",
        }

    def test_request_settings_rejects_unknown_action(self):
        with pytest.raises(ValidationError):
            RequestSettingsParams(name="x", action="deliver")  # type: ignore[arg-type]

    def test_settings_use_api_field_names(self):
        params = SettingsParams(default_ttl=3600, stale_if_error=True)
        assert params.to_form() == {
            "general.default_ttl": "3600",
            "general.stale_if_error": "1",
        }

    def test_settings_accept_api_field_names(self):
        params = SettingsParams(**{"general.default_host": "example.com"})
        assert params.default_host == "example.com"

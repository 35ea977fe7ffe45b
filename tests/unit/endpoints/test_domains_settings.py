"""Tests for the domain and settings helpers."""

import pytest

from phastly import DomainParams, RequestSettingsParams, SettingsParams


class TestDomains:
    @pytest.mark.asyncio
    async def test_create_domain(self, client, recorder, form_of):
        await client.create_domain(
            "svc", 2, DomainParams(name="www.example.com", comment="main")
        )
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/service/svc/version/2/domain"
        assert form_of(recorder.last) == {"name": "www.example.com", "comment": "main"}

    @pytest.mark.asyncio
    async def test_check_all_domains_returns_list(self, client, recorder):
        recorder.respond_json([[{"name": "www.example.com"}, "cname.fastly.net", True]])
        result = await client.check_all_domains("svc", 2)
        assert result[0][2] is True


class TestSettings:
    @pytest.mark.asyncio
    async def test_update_settings(self, client, recorder, form_of):
        await client.update_settings(
            "svc", 2, SettingsParams(default_ttl=3600, default_host="example.com")
        )
        assert recorder.last.method == "PUT"
        assert form_of(recorder.last) == {
            "general.default_ttl": "3600",
            "general.default_host": "example.com",
        }

    @pytest.mark.asyncio
    async def test_create_request_settings(self, client, recorder, form_of):
        await client.create_request_settings(
            "svc", 2, RequestSettingsParams(name="no-cache", force_miss=True)
        )
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/service/svc/version/2/request_settings"
        assert form_of(recorder.last) == {"name": "no-cache", "force_miss": "1"}

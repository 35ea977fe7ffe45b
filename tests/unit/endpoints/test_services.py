"""Tests for the service helpers."""

import pytest

from phastly import ServiceUpdate


class TestCreateService:
    @pytest.mark.asyncio
    async def test_create_service(self, client, recorder, api_key, form_of):
        recorder.respond_json({"id": "abc", "name": "foo"})

        service = await client.create_service("foo")

        request = recorder.last
        assert request.method == "POST"
        assert str(request.url) == "https://api.fastly.com/service"
        assert form_of(request) == {"name": "foo"}
        assert request.headers["Fastly-Key"] == api_key
        assert request.headers["Accept"] == "application/json"
        assert service == {"id": "abc", "name": "foo"}

    @pytest.mark.asyncio
    async def test_create_service_with_comment(self, client, recorder, form_of):
        await client.create_service("foo", comment="staging")
        assert form_of(recorder.last) == {"name": "foo", "comment": "staging"}


class TestUpdateService:
    @pytest.mark.asyncio
    async def test_rename_service(self, client, recorder, form_of):
        await client.rename_service("abc", "bar")
        assert recorder.last.method == "PUT"
        assert form_of(recorder.last) == {"name": "bar"}

    @pytest.mark.asyncio
    async def test_update_with_model(self, client, recorder, form_of):
        await client.update_service("abc", ServiceUpdate(comment="c", customer_id="x"))
        assert form_of(recorder.last) == {"comment": "c", "customer_id": "x"}

    @pytest.mark.asyncio
    async def test_update_with_mapping(self, client, recorder, form_of):
        await client.update_service("abc", {"name": "n", "comment": "c"})
        assert form_of(recorder.last) == {"name": "n", "comment": "c"}


class TestReadServices:
    @pytest.mark.asyncio
    async def test_get_service_by_name_encodes_query(self, client, recorder):
        await client.get_service_by_name("my service&co")

        request = recorder.last
        assert request.url.path == "/service/search"
        assert request.url.params["name"] == "my service&co"

    @pytest.mark.asyncio
    async def test_get_service_repeatable(self, client, recorder):
        """Unchanged remote state gives identical results on repeated calls."""
        recorder.respond_json({"id": "abc", "name": "foo", "versions": [{"number": 1}]})
        first = await client.get_service("abc")
        second = await client.get_service("abc")
        assert first == second
        assert len(recorder.requests) == 2

    @pytest.mark.asyncio
    async def test_list_services_repeatable(self, client, recorder):
        recorder.respond_json([{"id": "a"}, {"id": "b"}])
        assert await client.list_services() == await client.list_services()

    @pytest.mark.asyncio
    async def test_list_domains_repeatable(self, client, recorder):
        recorder.respond_json([{"name": "www.example.com", "version": 1}])
        assert await client.list_domains("abc") == await client.list_domains("abc")

    @pytest.mark.asyncio
    async def test_service_id_is_percent_encoded(self, client, recorder):
        await client.get_service("a/b")
        assert recorder.last.url.raw_path.decode() == "/service/a%2Fb"

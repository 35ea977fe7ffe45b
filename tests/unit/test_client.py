"""Unit tests for FastlyClient."""

import httpx
import pytest

from phastly import ClientConfig, FastlyClient, RequestDescriptor
from phastly.exceptions import ConfigurationError, RequestFailedError
from phastly.observability import RequestMetrics


class TestClientConstruction:
    def test_api_key_argument(self):
        client = FastlyClient(api_key="k1")
        assert client.config.api_key == "k1"

    def test_api_key_overrides_config(self):
        client = FastlyClient(api_key="k2", config=ClientConfig(api_key="k1"))
        assert client.config.api_key == "k2"

    def test_from_env(self):
        client = FastlyClient.from_env(
            {"FASTLY_API_KEY": "env-key", "FASTLY_TIMEOUT_MS": "1000"}
        )
        assert client.config.api_key == "env-key"
        assert client.config.timeout_ms == 1000

    def test_shared_metrics(self):
        metrics = RequestMetrics()
        client = FastlyClient(api_key="k", metrics=metrics)
        assert client.metrics is metrics


class TestClientCredentials:
    @pytest.mark.asyncio
    async def test_calls_fail_until_key_set(self, recorder):
        client = FastlyClient(transport=httpx.MockTransport(recorder))
        with pytest.raises(ConfigurationError):
            await client.list_services()
        assert recorder.requests == []

        client.set_api_key("late-key")
        await client.list_services()
        assert recorder.last.headers["Fastly-Key"] == "late-key"

    @pytest.mark.asyncio
    async def test_clients_keep_separate_keys(self, recorder):
        transport = httpx.MockTransport(recorder)
        tenant_a = FastlyClient(api_key="key-a", transport=transport)
        tenant_b = FastlyClient(api_key="key-b", transport=transport)

        await tenant_a.purge_all("svc-a")
        await tenant_b.purge_all("svc-b")

        assert [r.headers["Fastly-Key"] for r in recorder.requests] == [
            "key-a",
            "key-b",
        ]

    @pytest.mark.asyncio
    async def test_clients_sharing_config_keep_own_keys(self, recorder):
        transport = httpx.MockTransport(recorder)
        shared = ClientConfig()
        tenant_a = FastlyClient(api_key="key-a", config=shared, transport=transport)
        tenant_b = FastlyClient(api_key="key-b", config=shared, transport=transport)

        await tenant_a.list_services()
        await tenant_b.list_services()
        tenant_b.set_api_key("key-c")
        await tenant_a.list_services()

        assert [r.headers["Fastly-Key"] for r in recorder.requests] == [
            "key-a",
            "key-b",
            "key-a",
        ]
        assert shared.api_key is None


class TestRawRequests:
    @pytest.mark.asyncio
    async def test_send(self, client, recorder, form_of):
        await client.send(
            "service/svc/version/1/gzip", method="post", form={"name": "gzip"}
        )
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/service/svc/version/1/gzip"
        assert form_of(recorder.last) == {"name": "gzip"}

    @pytest.mark.asyncio
    async def test_dispatch(self, client, recorder):
        recorder.respond_json({"status": "ok"})
        result = await client.dispatch(
            RequestDescriptor(endpoint="service/svc/purge_all", method="POST")
        )
        assert result == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_empty_response_scenario(self, client, recorder, api_key):
        """An empty body from any helper surfaces as an application error."""
        recorder.respond_raw(b"")
        with pytest.raises(RequestFailedError) as exc_info:
            await client.get_service_details("svc")
        message = str(exc_info.value)
        assert "GET" in message
        assert "https://api.fastly.com/service/svc/details" in message
        assert api_key not in message


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_async_context_manager(self, config, recorder):
        async with FastlyClient(
            config=config, transport=httpx.MockTransport(recorder)
        ) as client:
            await client.list_services()
            http_client = client.dispatcher._http_client
        assert http_client.is_closed

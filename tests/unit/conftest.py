"""
Shared fixtures for phastly unit tests.

HTTP traffic is served by httpx.MockTransport; no test touches the network.
"""

import json
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

from phastly import ClientConfig, FastlyClient

API_KEY = "test-secret-key-8c1f"


class RecordingTransport:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = b"{}"
        self.error_factory: Callable[[httpx.Request], Exception] | None = None

    def respond_json(self, data: Any, status_code: int = 200) -> None:
        self.body = json.dumps(data).encode()
        self.status_code = status_code

    def respond_raw(self, body: bytes, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def fail_with(self, error_factory: Callable[[httpx.Request], Exception]) -> None:
        self.error_factory = error_factory

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error_factory is not None:
            raise self.error_factory(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def decode_form(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body."""
    return dict(parse_qsl(request.content.decode(), keep_blank_values=True))


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def form_of():
    """Decoder for form-encoded request bodies."""
    return decode_form


@pytest.fixture
def recorder():
    """A RecordingTransport answering {} with status 200."""
    return RecordingTransport()


@pytest.fixture
def config():
    """Client configuration with a test API key."""
    return ClientConfig(api_key=API_KEY)


@pytest.fixture
def client(config, recorder):
    """FastlyClient wired to the recording transport."""
    return FastlyClient(config=config, transport=httpx.MockTransport(recorder))

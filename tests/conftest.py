"""Shared fixtures: clients wired to an in-process httpx.MockTransport."""

import json
from typing import Callable

import httpx
import pytest

from xilabs_client import XiLabsClient

Handler = Callable[[httpx.Request], httpx.Response]


def json_response(data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=data)


def request_json(request: httpx.Request):
    return json.loads(request.content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's real credentials out of the tests."""
    monkeypatch.delenv("ELEVENLABS_API_KEY", raising=False)
    monkeypatch.delenv("ELEVENLABS_BASE_URL", raising=False)


@pytest.fixture
def make_client():
    """Factory returning (client, recorded requests) for a response handler."""

    def factory(handler: Handler, **kwargs) -> tuple[XiLabsClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        kwargs.setdefault("api_key", "test-key")
        client = XiLabsClient(http_transport=httpx.MockTransport(recording_handler), **kwargs)
        return client, requests

    return factory

import json
import os
from typing import Callable, List

import httpx
import pytest

os.environ.setdefault("FREEPIK_API_URL", "https://freepik.test/v1/ai/text-to-image/flux-dev")
os.environ.setdefault("FREEPIK_API_KEY", "test-key")

from thumbnail_generator.config import FreepikConfig, Settings

API_URL = "https://freepik.test/v1/ai/text-to-image/flux-dev"
API_KEY = "test-key"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def freepik_config() -> FreepikConfig:
    return FreepikConfig(api_url=API_URL, api_key=API_KEY, timeout_seconds=5.0)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, freepik_api_url=API_URL, freepik_api_key=API_KEY, freepik_timeout_seconds=5.0)


class RecordingUpstream:
    """Fake Freepik endpoint that records every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def payloads(self) -> List[dict]:
        return [json.loads(request.content) for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream_factory():
    return RecordingUpstream


@pytest.fixture
def make_app(settings):
    def _make(upstream: RecordingUpstream):
        from thumbnail_generator.app import create_app

        return create_app(settings, http_client=upstream.client())

    return _make


@pytest.fixture
def api_client_for():
    def _client(app) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

    return _client

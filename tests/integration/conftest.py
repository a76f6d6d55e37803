"""Integration test fixtures.

Provides a fake completion provider served through httpx.MockTransport,
so the real CompletionClient and the full app run without network access.
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from sentiment_api.llm.completion_client import CompletionClient
from sentiment_api.main import create_app


class FakeProvider:
    """Scriptable stand-in for the remote completion endpoint.
    
    Records every request it receives. By default answers with a completion
    whose content is ``content``; set ``status_code``/``raw_body`` or
    ``error`` to simulate failures.
    """
    
    def __init__(self, make_body: Callable[..., dict]):
        self._make_body = make_body
        self.requests: list[httpx.Request] = []
        self.content: Any = '{"sentiment": "Positif"}'
        self.status_code = 200
        self.raw_body: Optional[str] = None
        self.error: Optional[Exception] = None
    
    @property
    def calls(self) -> int:
        return len(self.requests)
    
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)
    
    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, text=self.raw_body)
        return httpx.Response(self.status_code, json=self._make_body(self.content))


@pytest.fixture
def fake_provider(make_completion_body) -> FakeProvider:
    return FakeProvider(make_completion_body)


@pytest.fixture
def app(test_settings, fake_provider):
    """Application wired to the fake provider."""
    llm_client = CompletionClient(
        url=test_settings.LLM_URL,
        api_key=test_settings.LLM_API_KEY,
        timeout=test_settings.LLM_TIMEOUT,
        transport=httpx.MockTransport(fake_provider),
    )
    return create_app(test_settings, llm_client=llm_client)


@pytest.fixture
def client(app):
    """TestClient with startup/shutdown hooks run."""
    with TestClient(app) as test_client:
        yield test_client

"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a running LLM provider.
"""

from unittest.mock import AsyncMock

import pytest

from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.llm.prompt_builder import PromptBuilder
from sentiment_api.service.sentiment_service import SentimentService


@pytest.fixture
def mock_llm_client():
    """Mock completion client returning a structured positive label."""
    mock = AsyncMock(spec=BaseLLMClient)
    mock.complete = AsyncMock(return_value='{"sentiment": "Positif"}')
    mock.close = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """Prompt builder using the packaged templates and default parameters."""
    return PromptBuilder()


@pytest.fixture
def sentiment_service(mock_llm_client, prompt_builder) -> SentimentService:
    """SentimentService wired to the mock client."""
    return SentimentService(llm_client=mock_llm_client, prompt_builder=prompt_builder)

"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from typing import Any, Callable, Dict

import pytest

from sentiment_api.config import Settings
from sentiment_api.models.sentiment_models import SentimentRequest


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.LLM_TIMEOUT = 5
    """
    return Settings(
        # === Application ===
        APP_NAME="Sentiment Analysis API (Test)",
        APP_VERSION="1.0.0",
        LOG_LEVEL="debug",
        LOG_FORMAT="text",
        
        # === LLM Provider ===
        LLM_API_KEY="test-api-key",
        LLM_URL="http://llm.test/v1/chat/completions",
        LLM_MODEL="telkom-ai-instruct",
        LLM_TIMEOUT=60,
        
        # === Feature Flags ===
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def sample_request() -> SentimentRequest:
    """Label-only request with a clearly positive answer."""
    return SentimentRequest(
        text_pertanyaan="Bagaimana pendapat Anda tentang layanan kami?",
        text_jawaban="Layanan Anda sangat memuaskan dan responsif",
    )


@pytest.fixture
def sample_reasoning_request() -> SentimentRequest:
    """Request asking for a reasoning explanation."""
    return SentimentRequest(
        text_pertanyaan="Bagaimana pengalaman Anda dengan aplikasi kami?",
        text_jawaban="Aplikasinya sering error dan sangat lambat",
        reasoning=True,
    )


@pytest.fixture
def make_completion_body() -> Callable[..., Dict[str, Any]]:
    """Factory fixture building a provider completion response body.
    
    Usage:
        def test_something(make_completion_body):
            body = make_completion_body('{"sentiment": "Positif"}')
    """
    def _create(content: Any = '{"sentiment": "Positif"}', model: str = "telkom-ai-instruct") -> Dict[str, Any]:
        return {
            "choices": [
                {"message": {"role": "assistant", "content": content}, "index": 0}
            ],
            "model": model,
            "usage": {"prompt_tokens": 120, "completion_tokens": 8, "total_tokens": 128},
        }
    
    return _create

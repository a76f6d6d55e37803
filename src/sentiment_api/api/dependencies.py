"""
FastAPI dependency injection for the Sentiment Analysis API.

Expensive resources (completion client, prompt builder) are created once by
the application factory and kept on ``app.state``; the SentimentService is
assembled per request from them.
"""

from fastapi import Depends, Request

from sentiment_api.config import Settings
from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.llm.completion_client import CompletionClient
from sentiment_api.llm.prompt_builder import PromptBuilder
from sentiment_api.service.sentiment_service import SentimentService
from sentiment_api.validation.request_validator import RequestValidator


def build_llm_client(settings: Settings) -> BaseLLMClient:
    """Create the completion client from settings."""
    return CompletionClient(
        url=settings.LLM_URL,
        api_key=settings.LLM_API_KEY,
        timeout=settings.LLM_TIMEOUT,
    )


def build_prompt_builder(settings: Settings) -> PromptBuilder:
    """Create the prompt builder (loads Jinja2 templates once)."""
    return PromptBuilder(
        model=settings.LLM_MODEL,
        label_max_tokens=settings.LABEL_MAX_TOKENS,
        label_temperature=settings.LABEL_TEMPERATURE,
        reasoning_max_tokens=settings.REASONING_MAX_TOKENS,
        reasoning_temperature=settings.REASONING_TEMPERATURE,
    )


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_llm_client(request: Request) -> BaseLLMClient:
    """
    Shared completion client.
    
    Only holds read-only configuration (credential, timeout, headers)
    plus the connection pool, so sharing it across requests is safe.
    """
    return request.app.state.llm_client


def get_prompt_builder(request: Request) -> PromptBuilder:
    return request.app.state.prompt_builder


def get_sentiment_service(
    llm_client: BaseLLMClient = Depends(get_llm_client),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    settings: Settings = Depends(get_settings),
) -> SentimentService:
    """
    Create sentiment service with injected dependencies.
    
    Note: SentimentService is NOT cached because it's lightweight and stateless.
    
    Args:
        llm_client: Completion client singleton (injected)
        prompt_builder: Prompt builder singleton (injected)
        settings: Application settings (injected)
    
    Returns:
        SentimentService instance
    """
    return SentimentService(
        llm_client=llm_client,
        prompt_builder=prompt_builder,
        validator=RequestValidator(
            question_max_length=settings.QUESTION_MAX_LENGTH,
            answer_max_length=settings.ANSWER_MAX_LENGTH,
        ),
    )

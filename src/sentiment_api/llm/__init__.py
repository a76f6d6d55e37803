"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for completion clients
- CompletionClient: httpx client for the remote completion endpoint
- PromptBuilder: Renders [system, user] prompts from Jinja2 templates
- exceptions: LLM-specific exceptions
"""

from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.llm.completion_client import CompletionClient
from sentiment_api.llm.prompt_builder import PromptBuilder
from sentiment_api.llm.exceptions import (
    LLMClientError,
    TransportError,
    UpstreamTimeoutError,
    UpstreamStatusError,
    EmptyChoicesError,
    MalformedResponseError,
)

__all__ = [
    "BaseLLMClient",
    "CompletionClient",
    "PromptBuilder",
    "LLMClientError",
    "TransportError",
    "UpstreamTimeoutError",
    "UpstreamStatusError",
    "EmptyChoicesError",
    "MalformedResponseError",
]

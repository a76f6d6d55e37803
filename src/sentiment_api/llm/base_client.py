"""
Abstract base client for LLM completion.

Defines the interface the sentiment service depends on, so the provider
client can be swapped or mocked without touching the extraction pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from sentiment_api.models.llm_models import CompletionRequest, Message


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM completion clients.
    
    Responsibilities:
    - Send one completion request to the provider
    - Return the first choice's raw content (not interpreted)
    - Map transport/status/shape failures to LLMClientError subclasses
    
    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Interpreting the content (that's SentimentExtractor's job)
    - Retries (a failed call is reported immediately)
    """
    
    def __init__(
        self,
        url: str,
        timeout: int = 60,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialize base client.
        
        Args:
            url: Full URL of the completion endpoint
            timeout: Overall request timeout in seconds
            logger: Structured logger (defaults to the module logger)
        """
        self.url = url
        self.timeout = timeout
        self.logger = logger or structlog.get_logger(__name__)
    
    @abstractmethod
    async def complete(self, request: CompletionRequest) -> Any:
        """
        Send a completion request and return ``choices[0].message.content``.
        
        Raises:
            TransportError: Network failure (UpstreamTimeoutError on timeout)
            UpstreamStatusError: Non-success HTTP status
            EmptyChoicesError: Response has no choices
            MalformedResponseError: Response body is not a completion response
        """
        pass
    
    async def invoke(
        self,
        messages: list[Message],
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> Any:
        """
        Build a fresh CompletionRequest from its parts and send it.
        
        Convenience wrapper over complete(). SentimentService calls
        complete() directly with the request PromptBuilder.build_request made.
        """
        request = CompletionRequest(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return await self.complete(request)
    
    async def close(self):
        """Close client connections. Default implementation does nothing."""
        pass
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"url={self.url}, "
            f"timeout={self.timeout}s)"
        )

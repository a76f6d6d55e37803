"""
Pydantic data models for the Sentiment Analysis API.

Includes:
- Enums (SentimentLabel, MessageRole)
- LLM wire models (Message, CompletionRequest, CompletionResponse)
- Domain models (SentimentRequest, ExtractionResult)
"""

from sentiment_api.models.enums import MessageRole, SentimentLabel
from sentiment_api.models.llm_models import (
    ChoiceMessage,
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    Message,
)
from sentiment_api.models.sentiment_models import ExtractionResult, SentimentRequest

__all__ = [
    # Enums
    "SentimentLabel",
    "MessageRole",
    # LLM models
    "Message",
    "CompletionRequest",
    "ChoiceMessage",
    "CompletionChoice",
    "CompletionResponse",
    # Domain models
    "SentimentRequest",
    "ExtractionResult",
]

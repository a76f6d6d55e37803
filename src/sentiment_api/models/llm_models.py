"""
Wire models for the remote completion endpoint.

These models mirror the provider's chat-completion payloads and are internal
to the LLM layer. Only ``choices[0].message.content`` of a response is ever
consumed by the rest of the service.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sentiment_api.models.enums import MessageRole


class Message(BaseModel):
    """A single role-tagged prompt message."""
    model_config = ConfigDict(frozen=True)
    
    role: MessageRole = Field(..., description="Message role (system or user)")
    content: str = Field(..., description="Message text")


class CompletionRequest(BaseModel):
    """
    Request body for the completion endpoint.
    
    Constructed fresh for every call and never reused.
    """
    model_config = ConfigDict(frozen=True)
    
    model: str = Field(..., description="Model identifier (e.g., 'telkom-ai-instruct')")
    messages: list[Message] = Field(..., min_length=1, description="Ordered [system, user] messages")
    stream: Literal[False] = Field(default=False, description="Streaming is never used")
    max_tokens: int = Field(..., ge=1, description="Maximum output tokens")
    temperature: float = Field(..., ge=0.0, le=2.0, description="Sampling temperature")


class ChoiceMessage(BaseModel):
    """
    Message of a completion choice.
    
    Content is kept untyped: providers occasionally return null or
    structured content, which the extractor treats as an extraction error.
    """
    model_config = ConfigDict(extra="ignore")
    
    role: Optional[str] = None
    content: Any = None


class CompletionChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    message: ChoiceMessage
    index: int = 0


class CompletionResponse(BaseModel):
    """Response body from the completion endpoint."""
    model_config = ConfigDict(extra="ignore")
    
    choices: list[CompletionChoice] = Field(default_factory=list)
    model: Optional[str] = None
    usage: Any = None

"""
API-specific request and response models for FastAPI endpoints.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

from sentiment_api.models.enums import SentimentLabel


class SentimentResponse(BaseModel):
    """Response for the analyze endpoint."""
    
    sentiment: SentimentLabel = Field(
        description="The analyzed sentiment: Positif, Negatif, or Netral",
        examples=["Positif"],
    )
    reasoning: Optional[str] = Field(
        default=None,
        description="LLM reasoning explanation (only when requested and provided)",
        examples=[
            "Teks menunjukkan kepuasan pelanggan dengan kata-kata positif "
            "seperti 'memuaskan' dan 'responsif'"
        ],
    )


class APIResponse(BaseModel):
    """Generic success envelope."""
    
    success: bool = Field(examples=[True])
    data: Any = None
    error: Any = None


class HealthResponse(BaseModel):
    """Response for liveness probe."""
    
    status: str = Field(
        description="Liveness status",
        examples=["healthy"]
    )
    service: str = Field(
        description="Service name",
        examples=["Sentiment Analysis API"]
    )
    version: str = Field(
        description="Service version",
        examples=["1.0.0"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="Error code or type",
        examples=["validation_failed", "llm_upstream_error", "internal_error"]
    )
    message: str = Field(
        description="Human-readable error message"
    )
    details: Optional[dict] = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp (UTC)"
    )

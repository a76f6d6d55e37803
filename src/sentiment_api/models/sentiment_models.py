"""
Domain models for sentiment classification.

SentimentRequest is the inbound payload; ExtractionResult is the only entity
that crosses back from the LLM layer into the rest of the service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sentiment_api.models.enums import SentimentLabel


class SentimentRequest(BaseModel):
    """
    Question/answer pair to classify.
    
    Length and blank checks are done by RequestValidator rather than by
    field constraints, so that they surface as domain validation errors.
    """
    model_config = ConfigDict(frozen=True)
    
    text_pertanyaan: str = Field(
        ...,
        description="The question or prompt text",
        examples=["Bagaimana pendapat Anda tentang layanan kami?"],
    )
    text_jawaban: str = Field(
        ...,
        description="The answer or response text to be analyzed",
        examples=["Layanan Anda sangat memuaskan dan responsif"],
    )
    reasoning: Optional[bool] = Field(
        default=None,
        description="Request a reasoning explanation from the LLM (default: false)",
        examples=[True],
    )
    
    @property
    def wants_reasoning(self) -> bool:
        return bool(self.reasoning)


class ExtractionResult(BaseModel):
    """Canonical classification outcome."""
    model_config = ConfigDict(frozen=True)
    
    sentiment: SentimentLabel = Field(..., description="Canonical sentiment label")
    reasoning: Optional[str] = Field(
        default=None,
        description="Model rationale (only when requested and provided)",
    )

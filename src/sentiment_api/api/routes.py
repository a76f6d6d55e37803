"""
API routes for sentiment classification.

- POST /api/v1/sentiment/analyze: classify one question/answer pair
- GET /api/v1/sentiment/types: canonical labels
- GET /health: liveness probe (no upstream call)
"""

import structlog
from fastapi import APIRouter, Depends, status

from sentiment_api.api.dependencies import get_sentiment_service, get_settings
from sentiment_api.api.models import (
    APIResponse,
    ErrorResponse,
    HealthResponse,
    SentimentResponse,
)
from sentiment_api.config import Settings
from sentiment_api.models.enums import SentimentLabel
from sentiment_api.models.sentiment_models import SentimentRequest
from sentiment_api.service.sentiment_service import SentimentService

logger = structlog.get_logger(__name__)

router = APIRouter()
sentiment_router = APIRouter(prefix="/api/v1/sentiment")


@sentiment_router.post(
    "/analyze",
    response_model=SentimentResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Analyze sentiment of an answer",
    description="""
    Classify the sentiment of `text_jawaban` in the context of `text_pertanyaan`.
    
    Always returns one of Positif, Negatif or Netral when the LLM call succeeds;
    ambiguous model output degrades to Netral. Set `reasoning: true` to also
    receive the model's explanation.
    """,
    responses={
        200: {"description": "Sentiment classified"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        502: {"model": ErrorResponse, "description": "LLM service failed"},
        504: {"model": ErrorResponse, "description": "LLM service timed out"},
    },
)
async def analyze_sentiment(
    request: SentimentRequest,
    service: SentimentService = Depends(get_sentiment_service),
) -> SentimentResponse:
    """
    Analyze sentiment of a question/answer pair.
    
    Args:
        request: SentimentRequest body
        service: Sentiment service (injected)
    
    Returns:
        SentimentResponse with canonical label and optional reasoning
    """
    result = await service.analyze(request)
    return SentimentResponse(sentiment=result.sentiment, reasoning=result.reasoning)


@sentiment_router.get(
    "/types",
    response_model=APIResponse,
    response_model_exclude_none=True,
    summary="List supported sentiment labels",
)
async def get_sentiment_types() -> APIResponse:
    """Return the canonical sentiment labels."""
    return APIResponse(success=True, data=SentimentLabel.values())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report that the process is up.
    
    Does not call the LLM provider.
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
    )

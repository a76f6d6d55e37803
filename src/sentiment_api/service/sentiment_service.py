"""
Sentiment analysis service.

Runs one classification pipeline per request:
RequestValidator -> PromptBuilder -> LLM client -> SentimentExtractor.

Makes exactly one remote call per request. Transport and upstream errors
propagate to the caller; extraction ambiguity is absorbed here and
degrades to the neutral label.
"""

from typing import Any, Optional

import structlog

from sentiment_api.extraction.exceptions import ExtractionError
from sentiment_api.extraction.extractor import SentimentExtractor
from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.llm.exceptions import LLMClientError
from sentiment_api.llm.prompt_builder import PromptBuilder
from sentiment_api.models.enums import SentimentLabel
from sentiment_api.models.sentiment_models import ExtractionResult, SentimentRequest
from sentiment_api.monitoring.metrics import (
    extraction_failures_total,
    sentiment_results_total,
)
from sentiment_api.validation.exceptions import ValidationError
from sentiment_api.validation.request_validator import RequestValidator


class SentimentService:
    """
    Orchestrates validation, prompting, completion and extraction.
    
    Stateless across requests: every collaborator is either immutable
    after construction or, for the LLM client, only holds read-only
    connection configuration.
    """
    
    def __init__(
        self,
        llm_client: BaseLLMClient,
        prompt_builder: PromptBuilder,
        validator: Optional[RequestValidator] = None,
        extractor: Optional[SentimentExtractor] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
        self.validator = validator or RequestValidator()
        self.extractor = extractor or SentimentExtractor()
        self.logger = logger or structlog.get_logger(__name__)
    
    async def analyze(self, request: Optional[SentimentRequest]) -> ExtractionResult:
        """
        Classify the sentiment of an answer relative to its question.
        
        Args:
            request: Question/answer pair with optional reasoning flag
        
        Returns:
            ExtractionResult whose sentiment is always a canonical label
        
        Raises:
            ValidationError: Invalid input (no remote call was made)
            LLMClientError: The completion call failed
        """
        want_reasoning = request.wants_reasoning if request is not None else False
        self.logger.info(
            "Starting sentiment analysis",
            text_pertanyaan_length=len(request.text_pertanyaan) if request else 0,
            text_jawaban_length=len(request.text_jawaban) if request else 0,
            reasoning_requested=want_reasoning,
        )
        
        try:
            self.validator.validate(request)
        except ValidationError as exc:
            self.logger.warning("Request validation failed", error=exc.message, **exc.details)
            raise
        
        completion_request = self.prompt_builder.build_request(
            request.text_pertanyaan,
            request.text_jawaban,
            want_reasoning=want_reasoning,
        )
        
        try:
            content = await self.llm_client.complete(completion_request)
        except LLMClientError as exc:
            self.logger.error(
                "Failed to analyze sentiment",
                error=exc.message,
                error_type=type(exc).__name__,
                details=exc.details,
            )
            raise
        
        result = self._extract(content, want_reasoning)
        sentiment_results_total.labels(sentiment=result.sentiment.value).inc()
        
        self.logger.info(
            "Sentiment analysis completed",
            sentiment=result.sentiment.value,
            reasoning_present=result.reasoning is not None,
        )
        return result
    
    def _extract(self, content: Any, want_reasoning: bool) -> ExtractionResult:
        """
        Extract with local fallbacks, never failing outward.
        
        On ExtractionError in reasoning mode the same already-fetched content
        is re-read in label-only mode; the model is never called twice.
        If that fails too, the neutral label is returned.
        """
        modes = (True, False) if want_reasoning else (False,)
        for mode in modes:
            try:
                return self.extractor.extract(content, want_reasoning=mode)
            except ExtractionError as exc:
                extraction_failures_total.labels(mode="reasoning" if mode else "label").inc()
                self.logger.error(
                    "Failed to extract sentiment from LLM response",
                    reasoning_mode=mode,
                    error=exc.message,
                    details=exc.details,
                )
        
        return ExtractionResult(sentiment=SentimentLabel.NETRAL)
    
    def supported_sentiments(self) -> list[str]:
        """Canonical labels this service can return."""
        return SentimentLabel.values()

"""
Extraction strategies for the fallback chain.

Each strategy inspects decoded content and either produces an
ExtractionResult or returns None to let the next strategy try:
- StructuredFieldExtractor: reads ``sentiment``/``reasoning`` from a JSON object
- HeuristicScanExtractor: keyword scan over the raw text (terminal, never None)
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from sentiment_api.extraction.content_decoder import DecodedContent, StructuredContent
from sentiment_api.extraction.normalizer import LabelNormalizer
from sentiment_api.models.enums import SentimentLabel
from sentiment_api.models.sentiment_models import ExtractionResult
from sentiment_api.monitoring.metrics import extraction_path_total

logger = structlog.get_logger(__name__)


class ExtractionStrategy(ABC):
    """Base class for one step of the extraction chain."""
    
    name: str = "base"
    
    @abstractmethod
    def extract(self, content: DecodedContent, want_reasoning: bool) -> Optional[ExtractionResult]:
        """
        Try to derive a result from decoded content.
        
        Returns:
            ExtractionResult, or None if this strategy does not apply
        """
        pass


class StructuredFieldExtractor(ExtractionStrategy):
    """
    Read fields from a decoded JSON object.
    
    ``sentiment`` must be a string; any other type makes this strategy
    decline so the chain falls back to scanning the original raw text.
    ``reasoning`` is honored only when requested and non-empty.
    """
    
    name = "structured"
    
    def __init__(self, normalizer: Optional[LabelNormalizer] = None):
        self.normalizer = normalizer or LabelNormalizer()
    
    def extract(self, content: DecodedContent, want_reasoning: bool) -> Optional[ExtractionResult]:
        if not isinstance(content, StructuredContent):
            return None
        
        sentiment = content.payload.get("sentiment")
        if not isinstance(sentiment, str):
            logger.debug(
                "Sentiment field is not a string",
                sentiment_type=type(sentiment).__name__,
            )
            return None
        
        reasoning = None
        if want_reasoning:
            candidate = content.payload.get("reasoning")
            if isinstance(candidate, str) and candidate:
                reasoning = candidate
        
        extraction_path_total.labels(path=self.name).inc()
        return ExtractionResult(
            sentiment=self.normalizer.normalize(sentiment),
            reasoning=reasoning,
        )


class HeuristicScanExtractor(ExtractionStrategy):
    """
    Case-insensitive keyword scan over the raw text.
    
    Keywords are checked in fixed priority order (positive, negative,
    neutral); the first hit wins. No hit yields Netral. Never returns None
    and never attaches a reasoning.
    """
    
    name = "heuristic"
    
    KEYWORDS: tuple[tuple[SentimentLabel, tuple[str, ...]], ...] = (
        (SentimentLabel.POSITIF, ("positif", "positive")),
        (SentimentLabel.NEGATIF, ("negatif", "negative")),
        (SentimentLabel.NETRAL, ("netral", "neutral")),
    )
    
    def __init__(self, default: SentimentLabel = SentimentLabel.NETRAL):
        self.default = default
    
    def extract(self, content: DecodedContent, want_reasoning: bool) -> Optional[ExtractionResult]:
        text = content.raw.lower()
        
        for label, keywords in self.KEYWORDS:
            if any(keyword in text for keyword in keywords):
                extraction_path_total.labels(path=self.name).inc()
                return ExtractionResult(sentiment=label)
        
        logger.info("No sentiment keyword found, defaulting", default=self.default.value)
        extraction_path_total.labels(path="heuristic_default").inc()
        return ExtractionResult(sentiment=self.default)

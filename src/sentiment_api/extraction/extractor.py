"""
Sentiment extractor: orchestrates decoding and the strategy chain.

Flow for one piece of model content:
1. Decode (StructuredContent | PlainTextContent)
2. StructuredFieldExtractor (JSON ``sentiment`` string)
3. HeuristicScanExtractor (keyword scan of the raw text, neutral default)

The chain is linear; the first strategy returning a result wins.
"""

from typing import Any, Optional, Sequence

import structlog

from sentiment_api.extraction.content_decoder import ContentDecoder
from sentiment_api.extraction.exceptions import ExtractionError
from sentiment_api.extraction.normalizer import LabelNormalizer
from sentiment_api.extraction.strategies import (
    ExtractionStrategy,
    HeuristicScanExtractor,
    StructuredFieldExtractor,
)
from sentiment_api.models.sentiment_models import ExtractionResult


class SentimentExtractor:
    """
    Turn raw completion content into an ExtractionResult.
    
    Deterministic for text input. Raises ExtractionError only when the
    content is not text, or when a custom chain ends without a result.
    """
    
    def __init__(
        self,
        decoder: Optional[ContentDecoder] = None,
        strategies: Optional[Sequence[ExtractionStrategy]] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialize extractor.
        
        Args:
            decoder: Content decoder (default: ContentDecoder())
            strategies: Ordered strategy chain (default: structured, heuristic)
            logger: Structured logger
        """
        self.decoder = decoder or ContentDecoder()
        if strategies is None:
            normalizer = LabelNormalizer()
            strategies = (StructuredFieldExtractor(normalizer), HeuristicScanExtractor())
        self.strategies = tuple(strategies)
        self.logger = logger or structlog.get_logger(__name__)
    
    def extract(self, content: Any, want_reasoning: bool = False) -> ExtractionResult:
        """
        Extract sentiment (and optional reasoning) from model content.
        
        Args:
            content: ``choices[0].message.content`` as returned by the client
            want_reasoning: Whether a ``reasoning`` field should be honored
            
        Returns:
            ExtractionResult with a canonical label
            
        Raises:
            ExtractionError: If content is not a string or no strategy applies
        """
        if not isinstance(content, str):
            raise ExtractionError(
                "unable to extract sentiment from result",
                details={"content_type": type(content).__name__},
            )
        
        decoded = self.decoder.decode(content)
        
        for strategy in self.strategies:
            result = strategy.extract(decoded, want_reasoning)
            if result is not None:
                self.logger.debug(
                    "Sentiment extracted",
                    strategy=strategy.name,
                    sentiment=result.sentiment.value,
                    reasoning_present=result.reasoning is not None,
                )
                return result
        
        raise ExtractionError(
            "no extraction strategy produced a label",
            details={"strategies": [s.name for s in self.strategies]},
        )

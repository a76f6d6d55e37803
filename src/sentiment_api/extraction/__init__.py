"""
Extraction of canonical sentiment labels from raw model content.

- content_decoder.py: JSON decode into StructuredContent | PlainTextContent
- strategies.py: StructuredFieldExtractor, HeuristicScanExtractor
- normalizer.py: Case-insensitive label mapping with neutral default
- extractor.py: Ordered fallback chain over the strategies
"""

from .content_decoder import (
    ContentDecoder,
    DecodedContent,
    PlainTextContent,
    StructuredContent,
)
from .exceptions import ExtractionError
from .extractor import SentimentExtractor
from .normalizer import LabelNormalizer, normalize_label
from .strategies import (
    ExtractionStrategy,
    HeuristicScanExtractor,
    StructuredFieldExtractor,
)

__all__ = [
    "ContentDecoder",
    "DecodedContent",
    "PlainTextContent",
    "StructuredContent",
    "ExtractionError",
    "SentimentExtractor",
    "LabelNormalizer",
    "normalize_label",
    "ExtractionStrategy",
    "StructuredFieldExtractor",
    "HeuristicScanExtractor",
]

"""
Content decoding: first step of the extraction chain.

Tries to interpret raw model content as JSON. The result is a small tagged
variant: StructuredContent when the content is a JSON object carrying a
``sentiment`` key, PlainTextContent (raw text unchanged) otherwise.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Union

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlainTextContent:
    """Content that is not a usable JSON object; scanned as text."""
    raw: str


@dataclass(frozen=True)
class StructuredContent:
    """Content that decoded to a JSON object with a ``sentiment`` key."""
    raw: str
    payload: dict[str, Any] = field(default_factory=dict)


DecodedContent = Union[StructuredContent, PlainTextContent]


class ContentDecoder:
    """
    Decode raw content into StructuredContent or PlainTextContent.
    
    Never raises for string input: any decode failure degrades to
    PlainTextContent so the heuristic scan can take over.
    """
    
    def decode(self, content: str) -> DecodedContent:
        """
        Decode model content.
        
        Args:
            content: Raw ``message.content`` text
            
        Returns:
            StructuredContent for a JSON object containing ``sentiment``,
            PlainTextContent (with the raw text) for anything else
        """
        try:
            parsed = json.loads(content)
        except (ValueError, RecursionError) as e:
            logger.warning(
                "Content is not valid JSON, returning as string",
                error=str(e),
                content=content[:500],
            )
            return PlainTextContent(raw=content)
        
        if not isinstance(parsed, dict):
            logger.debug("Decoded JSON is not an object", json_type=type(parsed).__name__)
            return PlainTextContent(raw=content)
        
        if "sentiment" not in parsed:
            logger.debug("Decoded JSON object has no sentiment key", keys=sorted(parsed)[:20])
            return PlainTextContent(raw=content)
        
        logger.debug("JSON parsing successful")
        return StructuredContent(raw=content, payload=parsed)

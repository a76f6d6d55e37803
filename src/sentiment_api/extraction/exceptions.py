"""
Extraction-specific exceptions.

ExtractionError never reaches the HTTP caller: the service layer recovers
from it by substituting the neutral label.
"""

from typing import Any


class ExtractionError(Exception):
    """
    Raised when no label can be derived from the model content.
    
    Only reachable when the content is not text at all (e.g., a null or
    structured ``message.content`` from the provider), or when a custom
    strategy chain has no terminal strategy.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

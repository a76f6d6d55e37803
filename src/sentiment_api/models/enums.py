"""
Enumerations for the Sentiment Analysis API data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class SentimentLabel(str, Enum):
    """
    Canonical sentiment labels.
    
    Sentiment is single-label: every classification resolves to exactly
    one of these three values, never an arbitrary string.
    """
    
    POSITIF = "Positif"
    NEGATIF = "Negatif"
    NETRAL = "Netral"
    
    @classmethod
    def values(cls) -> list[str]:
        """Label strings in canonical order (positive, negative, neutral)."""
        return [label.value for label in cls]


class MessageRole(str, Enum):
    """Roles of the messages sent to the completion endpoint."""
    
    SYSTEM = "system"
    USER = "user"

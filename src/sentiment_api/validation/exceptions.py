"""
Request validation exceptions.

Raised before any remote call is made, so a rejected request never
consumes LLM quota. Mapped to 400 by the API layer.
"""

from typing import Any


class ValidationError(Exception):
    """
    Base exception for invalid classification requests.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize validation error.
        
        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        return self.message


class FieldValidationError(ValidationError):
    """
    A single request field failed validation.
    """
    
    def __init__(self, message: str, field: str, reason: str, **extra: Any):
        """
        Args:
            message: Error description
            field: Name of the offending field (e.g., "text_jawaban")
            reason: Short machine-readable reason ("empty", "too_long")
            **extra: Additional context (limits, actual length)
        """
        super().__init__(message, {"field": field, "reason": reason, **extra})
        self.field = field
        self.reason = reason

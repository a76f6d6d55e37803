"""
Request validation (runs before any LLM call).

- request_validator.py: Blank and length checks on SentimentRequest
- exceptions.py: ValidationError hierarchy
"""

from .exceptions import FieldValidationError, ValidationError
from .request_validator import RequestValidator

__all__ = [
    "RequestValidator",
    "ValidationError",
    "FieldValidationError",
]

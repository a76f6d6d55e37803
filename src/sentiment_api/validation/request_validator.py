"""
Request validation for sentiment classification.

Rejects obviously invalid input (missing request, blank or oversized
fields) before the prompt is built.
"""

from typing import Optional

import structlog

from sentiment_api.models.sentiment_models import SentimentRequest
from sentiment_api.monitoring.metrics import request_validation_failures_total
from .exceptions import FieldValidationError, ValidationError

logger = structlog.get_logger(__name__)


class RequestValidator:
    """
    Validate SentimentRequest objects.
    
    Checks, in order:
    1. Request is present
    2. text_pertanyaan is not blank (after trimming whitespace)
    3. text_jawaban is not blank
    4. text_pertanyaan length <= question_max_length characters
    5. text_jawaban length <= answer_max_length characters
    """
    
    def __init__(self, question_max_length: int = 1000, answer_max_length: int = 2000):
        self.question_max_length = question_max_length
        self.answer_max_length = answer_max_length
    
    def validate(self, request: Optional[SentimentRequest]) -> None:
        """
        Validate a request.
        
        Raises:
            ValidationError: If the request is missing or any field is invalid
        """
        if request is None:
            request_validation_failures_total.labels(reason="missing_request").inc()
            raise ValidationError("request cannot be empty", {"reason": "missing_request"})
        
        self._check_not_blank("text_pertanyaan", request.text_pertanyaan)
        self._check_not_blank("text_jawaban", request.text_jawaban)
        self._check_length("text_pertanyaan", request.text_pertanyaan, self.question_max_length)
        self._check_length("text_jawaban", request.text_jawaban, self.answer_max_length)
        
        logger.debug(
            "Request validated",
            question_length=len(request.text_pertanyaan),
            answer_length=len(request.text_jawaban),
        )
    
    def _check_not_blank(self, field: str, value: str) -> None:
        if not value or not value.strip():
            request_validation_failures_total.labels(reason="empty").inc()
            raise FieldValidationError(
                f"{field} cannot be empty",
                field=field,
                reason="empty",
            )
    
    def _check_length(self, field: str, value: str, max_length: int) -> None:
        if len(value) > max_length:
            request_validation_failures_total.labels(reason="too_long").inc()
            raise FieldValidationError(
                f"{field} exceeds maximum length of {max_length} characters",
                field=field,
                reason="too_long",
                max_length=max_length,
                length=len(value),
            )

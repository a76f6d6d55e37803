"""
Unit tests for request validation.
"""

import pytest

from sentiment_api.models.sentiment_models import SentimentRequest
from sentiment_api.validation.exceptions import FieldValidationError, ValidationError
from sentiment_api.validation.request_validator import RequestValidator


def make_request(question: str = "Bagaimana layanan kami?", answer: str = "Sangat baik") -> SentimentRequest:
    return SentimentRequest(text_pertanyaan=question, text_jawaban=answer)


class TestRequestValidator:
    """Test suite for RequestValidator."""
    
    def setup_method(self):
        self.validator = RequestValidator()
    
    def test_valid_request_passes(self):
        self.validator.validate(make_request())
    
    def test_none_request_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            self.validator.validate(None)
        
        assert "request cannot be empty" in str(exc_info.value)
    
    @pytest.mark.parametrize("question", ["", "   ", "\n\t "])
    def test_blank_question_rejected(self, question):
        with pytest.raises(FieldValidationError) as exc_info:
            self.validator.validate(make_request(question=question))
        
        assert exc_info.value.field == "text_pertanyaan"
        assert exc_info.value.reason == "empty"
        assert str(exc_info.value) == "text_pertanyaan cannot be empty"
    
    @pytest.mark.parametrize("answer", ["", "  "])
    def test_blank_answer_rejected(self, answer):
        with pytest.raises(FieldValidationError) as exc_info:
            self.validator.validate(make_request(answer=answer))
        
        assert exc_info.value.field == "text_jawaban"
        assert str(exc_info.value) == "text_jawaban cannot be empty"
    
    def test_question_at_limit_passes(self):
        self.validator.validate(make_request(question="a" * 1000))
    
    def test_question_over_limit_rejected(self):
        with pytest.raises(FieldValidationError) as exc_info:
            self.validator.validate(make_request(question="a" * 1001))
        
        assert exc_info.value.reason == "too_long"
        assert exc_info.value.details["max_length"] == 1000
        assert exc_info.value.details["length"] == 1001
        assert "text_pertanyaan exceeds maximum length of 1000 characters" in str(exc_info.value)
    
    def test_answer_at_limit_passes(self):
        self.validator.validate(make_request(answer="b" * 2000))
    
    def test_answer_over_limit_rejected(self):
        with pytest.raises(FieldValidationError) as exc_info:
            self.validator.validate(make_request(answer="b" * 2001))
        
        assert exc_info.value.field == "text_jawaban"
        assert "text_jawaban exceeds maximum length of 2000 characters" in str(exc_info.value)
    
    def test_length_counts_characters_not_bytes(self):
        # 1000 multi-byte characters are within the limit
        self.validator.validate(make_request(question="é" * 1000))
    
    def test_blank_check_runs_before_length_check(self):
        with pytest.raises(FieldValidationError) as exc_info:
            self.validator.validate(make_request(question="q" * 5000, answer=" "))
        
        assert exc_info.value.field == "text_jawaban"
        assert exc_info.value.reason == "empty"
    
    def test_custom_limits(self):
        validator = RequestValidator(question_max_length=10, answer_max_length=20)
        
        with pytest.raises(FieldValidationError):
            validator.validate(make_request(question="x" * 11))
        validator.validate(make_request(question="x" * 10, answer="y" * 20))

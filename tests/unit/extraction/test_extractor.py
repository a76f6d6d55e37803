"""
Unit tests for the sentiment extraction chain.
"""

from unittest.mock import Mock

import pytest

from sentiment_api.extraction.exceptions import ExtractionError
from sentiment_api.extraction.extractor import SentimentExtractor
from sentiment_api.extraction.strategies import HeuristicScanExtractor, StructuredFieldExtractor
from sentiment_api.models.enums import SentimentLabel


class TestSentimentExtractor:
    """Test suite for SentimentExtractor."""
    
    def setup_method(self):
        self.extractor = SentimentExtractor()
    
    @pytest.mark.parametrize("want_reasoning", [False, True])
    def test_structured_label_without_reasoning_key(self, want_reasoning):
        result = self.extractor.extract('{"sentiment":"Positive"}', want_reasoning=want_reasoning)
        
        assert result.sentiment is SentimentLabel.POSITIF
        assert result.reasoning is None
    
    def test_structured_label_with_reasoning(self):
        result = self.extractor.extract(
            '{"sentiment":"negative","reasoning":"kata kunci negatif"}',
            want_reasoning=True,
        )
        
        assert result.sentiment is SentimentLabel.NEGATIF
        assert result.reasoning == "kata kunci negatif"
    
    def test_plain_text_uses_heuristic_scan(self):
        result = self.extractor.extract("Jawaban ini terasa netral dan objektif")
        
        assert result.sentiment is SentimentLabel.NETRAL
        assert result.reasoning is None
    
    def test_gibberish_defaults_to_neutral(self):
        result = self.extractor.extract("random unparseable gibberish with no keywords")
        
        assert result.sentiment is SentimentLabel.NETRAL
        assert result.reasoning is None
    
    def test_non_string_sentiment_falls_back_to_raw_text(self):
        # The object is discarded; the original text is scanned
        result = self.extractor.extract(
            '{"sentiment": ["Positif"], "reasoning": "jelas positif"}',
            want_reasoning=True,
        )
        
        assert result.sentiment is SentimentLabel.POSITIF
        assert result.reasoning is None
    
    def test_object_without_sentiment_scans_raw_text(self):
        result = self.extractor.extract('{"label": "Negatif"}')
        assert result.sentiment is SentimentLabel.NEGATIF
    
    def test_fenced_json_scanned_as_text(self):
        content = '```json\n{"sentiment": "Negatif", "reasoning": "kecewa"}\n```'
        result = self.extractor.extract(content, want_reasoning=True)
        
        assert result.sentiment is SentimentLabel.NEGATIF
        assert result.reasoning is None
    
    @pytest.mark.parametrize("content", [None, 42, {"sentiment": "Positif"}, ["Positif"]])
    def test_non_string_content_raises(self, content):
        with pytest.raises(ExtractionError) as exc_info:
            self.extractor.extract(content)
        
        assert exc_info.value.details["content_type"] == type(content).__name__
    
    @pytest.mark.parametrize(
        "content",
        [
            '{"sentiment": "POSITIF"}',
            "positif",
            "",
            "[]",
            '{"sentiment": null}',
            "tidak ada",
        ],
    )
    def test_always_returns_canonical_label(self, content):
        result = self.extractor.extract(content, want_reasoning=True)
        assert result.sentiment.value in {"Positif", "Negatif", "Netral"}
    
    def test_first_strategy_result_wins(self):
        first = Mock(spec=StructuredFieldExtractor)
        first.name = "first"
        first.extract.return_value = None
        second = HeuristicScanExtractor()
        
        extractor = SentimentExtractor(strategies=[first, second])
        result = extractor.extract("negatif")
        
        first.extract.assert_called_once()
        assert result.sentiment is SentimentLabel.NEGATIF
    
    def test_chain_without_terminal_strategy_raises(self):
        extractor = SentimentExtractor(strategies=[StructuredFieldExtractor()])
        
        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract("no json here")
        
        assert exc_info.value.details["strategies"] == ["structured"]

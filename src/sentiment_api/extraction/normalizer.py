"""
Label normalization.

Maps Indonesian and English spellings of positive/negative/neutral, in any
letter case, to the canonical SentimentLabel. Pure and total: unknown input
maps to Netral.
"""

from sentiment_api.models.enums import SentimentLabel


LABEL_SPELLINGS: dict[str, SentimentLabel] = {
    "positif": SentimentLabel.POSITIF,
    "positive": SentimentLabel.POSITIF,
    "negatif": SentimentLabel.NEGATIF,
    "negative": SentimentLabel.NEGATIF,
    "netral": SentimentLabel.NETRAL,
    "neutral": SentimentLabel.NETRAL,
}


class LabelNormalizer:
    """Case-insensitive label mapping with a neutral default."""
    
    def __init__(self, default: SentimentLabel = SentimentLabel.NETRAL):
        self.default = default
    
    def normalize(self, raw_label: str) -> SentimentLabel:
        """
        Map a raw label string to its canonical label.
        
        Examples:
            >>> LabelNormalizer().normalize("POSITIVE")
            <SentimentLabel.POSITIF: 'Positif'>
            >>> LabelNormalizer().normalize("mixed")
            <SentimentLabel.NETRAL: 'Netral'>
        """
        if not isinstance(raw_label, str):
            return self.default
        return LABEL_SPELLINGS.get(raw_label.strip().lower(), self.default)


_default_normalizer = LabelNormalizer()


def normalize_label(raw_label: str) -> SentimentLabel:
    """Module-level shortcut using the default normalizer."""
    return _default_normalizer.normalize(raw_label)

"""Sentiment analysis service layer."""

from sentiment_api.service.sentiment_service import SentimentService

__all__ = ["SentimentService"]

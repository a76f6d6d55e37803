"""Monitoring and metrics instrumentation for the Sentiment Analysis API.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from sentiment_api.monitoring.metrics import (
    extraction_failures_total,
    extraction_path_total,
    llm_latency_seconds,
    llm_requests_total,
    llm_tokens_total,
    request_validation_failures_total,
    sentiment_results_total,
)

__all__ = [
    "llm_requests_total",
    "llm_latency_seconds",
    "llm_tokens_total",
    "extraction_path_total",
    "extraction_failures_total",
    "request_validation_failures_total",
    "sentiment_results_total",
]

"""Custom Prometheus metrics for the Sentiment Analysis API.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- llm_requests_total (upstream error rate)
- extraction_path_total (high heuristic/default share indicates prompt drift)
- extraction_failures_total (non-text content from the provider)
"""

from prometheus_client import Counter, Histogram

# === LLM Call Metrics ===

llm_requests_total = Counter(
    "llm_requests_total",
    "Total completion calls by model and outcome",
    ["model", "outcome"],
)
"""
Completion calls counter.

Labels:
- model: Model identifier sent to the provider
- outcome: success, transport_error, timeout, status_error, empty_choices, malformed_response
"""

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Completion call latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
"""
Completion latency histogram.

Buckets end at the fixed 60s request timeout.

Alert thresholds:
- WARN: p95 > 10s
- CRITICAL: p95 > 30s
"""

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens consumed by model and type",
    ["model", "token_type"],
)
"""
Token consumption counter (only when the provider reports usage).

Labels:
- token_type: prompt, completion
"""

# === Extraction Metrics ===

extraction_path_total = Counter(
    "extraction_path_total",
    "Extraction results by the path that produced the label",
    ["path"],
)
"""
Labels:
- path: structured (JSON field), heuristic (keyword scan), heuristic_default (no keyword found)
"""

extraction_failures_total = Counter(
    "extraction_failures_total",
    "Extraction errors recovered by the service layer",
    ["mode"],
)

# === Request Metrics ===

request_validation_failures_total = Counter(
    "request_validation_failures_total",
    "Requests rejected before any LLM call",
    ["reason"],
)

sentiment_results_total = Counter(
    "sentiment_results_total",
    "Classification results by canonical label",
    ["sentiment"],
)
"""Used to watch label distribution drift (e.g., sudden rise of Netral)."""

"""
Unit tests for the Sentiment Analysis API.

Test individual components in isolation:
- Label normalization, content decoding and extraction strategies
- Request validation (blank and oversized fields)
- Prompt builder (variants, parameters, wire format)
- Completion client (status, transport and shape failures via MockTransport)
- Sentiment service (fallback to Netral, one remote call per request)
"""

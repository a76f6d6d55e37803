"""
Sentiment Analysis API.

Classifies the sentiment of an answer given the question it responds to,
using a remote LLM completion endpoint as the classification engine:
- Prompt construction (label-only or label + reasoning)
- Single completion call per request (no retries)
- Layered extraction of a canonical label from free-form model output

Architecture: FastAPI orchestrator + remote completion API + fallback extraction chain
"""

__version__ = "1.0.0"

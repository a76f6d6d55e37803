"""
FastAPI API routes and endpoints.

- routes.py: POST /api/v1/sentiment/analyze, GET /api/v1/sentiment/types, GET /health
- dependencies.py: Dependency injection for LLM client, prompt builder, service
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing
"""

from sentiment_api.api import dependencies, error_handlers, models
from sentiment_api.api.routes import router, sentiment_router

__all__ = [
    "router",
    "sentiment_router",
    "dependencies",
    "error_handlers",
    "models",
]

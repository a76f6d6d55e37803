"""
FastAPI application entry point for the Sentiment Analysis API.
"""

import sys
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from sentiment_api.api.dependencies import build_llm_client, build_prompt_builder
from sentiment_api.api.error_handlers import EXCEPTION_HANDLERS
from sentiment_api.api.middleware import RequestTracingMiddleware
from sentiment_api.api.routes import router, sentiment_router
from sentiment_api.config import Settings, settings as default_settings
from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[BaseLLMClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to environment settings)
        llm_client: Completion client override (defaults to CompletionClient)

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        description="Sentiment analysis of question/answer pairs using an LLM backend",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.llm_client = llm_client or build_llm_client(settings)
    app.state.prompt_builder = build_prompt_builder(settings)

    # Binds request_id into the structlog context for every downstream log line
    app.add_middleware(RequestTracingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)

    app.include_router(router, tags=["health"])
    app.include_router(sentiment_router, tags=["sentiment"])

    @app.on_event("startup")
    async def startup():
        """Refuse to serve without LLM credentials."""
        missing = settings.missing_required()
        if missing:
            logger.error("Required configuration missing", missing=missing)
            raise RuntimeError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        logger.info(
            "Application startup",
            version=settings.APP_VERSION,
            llm_url=settings.LLM_URL,
            model=settings.LLM_MODEL,
        )

    @app.on_event("shutdown")
    async def shutdown():
        """Close the shared completion client."""
        await app.state.llm_client.close()
        logger.info("Application shutdown complete")

    if settings.PROMETHEUS_ENABLED:
        Instrumentator().instrument(app).expose(app)

    return app


configure_logging(default_settings.LOG_LEVEL, default_settings.LOG_FORMAT)
app = create_app()


def run() -> None:
    """Console entry point: validate configuration, then serve with uvicorn."""
    import uvicorn

    logger.info(
        "Starting Sentiment Analysis API",
        host=default_settings.SERVER_HOST,
        port=default_settings.SERVER_PORT,
    )

    missing = default_settings.missing_required()
    if missing:
        for name in missing:
            logger.error(f"{name} environment variable is required")
        sys.exit(1)

    # uvicorn exits with status 1 itself if the socket cannot be bound
    uvicorn.run(
        app,
        host=default_settings.SERVER_HOST,
        port=default_settings.SERVER_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()

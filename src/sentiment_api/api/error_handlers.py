"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to appropriate HTTP status codes and formats.
Every error body carries ``error`` and ``message``.
"""

from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sentiment_api.llm.exceptions import (
    EmptyChoicesError,
    LLMClientError,
    MalformedResponseError,
    TransportError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from sentiment_api.validation.exceptions import ValidationError

logger = structlog.get_logger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "error": error,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if details:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """
    Handle request validation errors (blank or oversized fields).
    
    Maps to 400 Bad Request.
    """
    logger.warning(
        "Validation error",
        error_type=type(exc).__name__,
        details=exc.details,
    )
    
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "validation_failed",
        exc.message,
        exc.details,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (missing fields, wrong types, bad JSON).
    
    Maps to 400 Bad Request (client error).
    """
    errors = jsonable_encoder(exc.errors())
    logger.warning("Invalid request format", errors=errors)
    
    fields = [
        ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        for error in errors
    ]
    message = "Invalid request body"
    if any(fields):
        message = f"Invalid or missing fields: {', '.join(f for f in fields if f)}"
    
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "invalid_request",
        message,
        {"errors": errors},
    )


async def llm_timeout_error_handler(request: Request, exc: UpstreamTimeoutError) -> JSONResponse:
    """
    Handle LLM timeout errors.
    
    Maps to 504 Gateway Timeout (upstream service timeout).
    """
    logger.error("LLM timeout error", error=str(exc))
    
    return error_response(
        status.HTTP_504_GATEWAY_TIMEOUT,
        "llm_timeout",
        "LLM service request timed out",
    )


async def llm_transport_error_handler(request: Request, exc: TransportError) -> JSONResponse:
    """
    Handle LLM connection errors.
    
    Maps to 502 Bad Gateway (upstream service unavailable).
    """
    logger.error("LLM connection error", error=str(exc), details=exc.details)
    
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "llm_connection_failed",
        "Unable to connect to LLM service",
    )


async def llm_status_error_handler(request: Request, exc: UpstreamStatusError) -> JSONResponse:
    """
    Handle non-success status codes from the LLM provider.
    
    Maps to 502 Bad Gateway; the upstream body is logged, not returned.
    """
    logger.error(
        "LLM upstream status error",
        upstream_status=exc.status_code,
        body=exc.body[:1000],
    )
    
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "llm_upstream_error",
        f"LLM service responded with status {exc.status_code}",
        {"upstream_status": exc.status_code},
    )


async def llm_invalid_response_handler(request: Request, exc: LLMClientError) -> JSONResponse:
    """
    Handle unusable successful responses (no choices, malformed body).
    
    Maps to 502 Bad Gateway.
    """
    logger.error(
        "LLM invalid response",
        error_type=type(exc).__name__,
        error=exc.message,
    )
    
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "llm_invalid_response",
        exc.message,
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)
    
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred",
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ValidationError: validation_error_handler,
    RequestValidationError: request_validation_error_handler,
    UpstreamTimeoutError: llm_timeout_error_handler,
    TransportError: llm_transport_error_handler,
    UpstreamStatusError: llm_status_error_handler,
    EmptyChoicesError: llm_invalid_response_handler,
    MalformedResponseError: llm_invalid_response_handler,
    LLMClientError: llm_invalid_response_handler,
    Exception: generic_error_handler,
}

"""Request correlation middleware.

Every request gets a request id bound into structlog's context variables,
so log lines emitted by the service, the extractor and the completion
client during that request can be correlated. The id is echoed back in
the ``X-Request-ID`` response header.
"""

import re
import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied ids are reused only if they look like an opaque token
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

# Probe endpoints are polled constantly; keep them out of info-level logs
QUIET_PATHS = frozenset({"/health", "/metrics"})


def resolve_request_id(request: Request) -> str:
    """Reuse a well-formed inbound X-Request-ID, otherwise mint a UUID4."""
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the lifetime of one request and log its outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = resolve_request_id(request)
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise
        else:
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()

"""HTTP request/response logging middleware for FastAPI."""

import time
from typing import Callable, Optional, Set
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ....infrastructure.logging import (
    clear_correlation_id,
    generate_correlation_id,
    get_logger,
    log_request,
    log_response,
    set_correlation_id
)

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and response under a correlation ID.

    The ID is taken from the ``X-Correlation-ID`` request header when present
    and echoed back on the response. Bodies are never logged: photo and audio
    payloads are large base64 strings.
    """

    def __init__(self, app: ASGIApp, exclude_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or {
            '/health',
            '/docs',
            '/redoc',
            '/openapi.json',
            '/favicon.ico'
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and response with logging."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)
        start_time = time.time()

        try:
            log_request(
                logger, request.method, request.url.path,
                request_query=str(request.query_params) if request.query_params else None,
                client_host=request.client.host if request.client else "unknown"
            )

            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000

            response.headers[CORRELATION_HEADER] = correlation_id
            log_response(logger, request.method, request.url.path, response.status_code, duration_ms)
            return response

        except Exception as exc:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "duration_ms": round(duration_ms, 2),
                    "error": str(exc),
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        finally:
            clear_correlation_id()

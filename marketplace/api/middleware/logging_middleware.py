"""
Request logging middleware.

Each request gets a correlation id, taken from the X-Correlation-ID header
or generated. It is bound to the logging context for the duration of the
request and echoed on the response.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from marketplace.core.shared import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and duration; probes are not logged."""

    EXCLUDE_PATHS: tuple[str, ...] = ("/health", "/favicon.ico")

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:12]
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            if request.url.path.startswith(self.EXCLUDE_PATHS):
                response = await call_next(request)
            else:
                response = await self._timed(request, call_next)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    async def _timed(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(f"{request.method} {request.url.path} raised {type(e).__name__} after {elapsed_ms:.2f}ms")
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.2f}ms "
            f"(client {self._client_ip(request)})",
        )
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"
        return response

    @staticmethod
    def _client_ip(request: Request) -> str:
        # First hop of X-Forwarded-For is the original client
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

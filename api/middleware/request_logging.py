"""
Request logging middleware.

Logs one line per request: method | path | status | client | duration.
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request once its response is ready."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        client = request.client.host if request.client else "-"
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s | %s | 500 | %s | %.1fms",
                request.method, request.url.path, client, duration_ms,
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s | %s | %d | %s | %.1fms",
            request.method, request.url.path, response.status_code, client, duration_ms,
        )
        return response

"""
Game Inventory — Request Logging Middleware
============================================

What:  One access log line per request: method, path, status, duration,
       request id and client address.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else (pages, 303 redirects) → INFO

Form bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from game_inventory.middleware.request_id import request_id_var

logger = logging.getLogger("game_inventory.access")

# Probes run every few seconds and would drown the page traffic
UNLOGGED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request with its duration once the response is ready.

    Duration runs from middleware entry to response return, so it covers
    form parsing, store calls and template rendering.

    Typical durations:
        - GET pages: 5-30ms (one or two gathered store reads)
        - POST forms: 10-40ms (validation, a lookup, one write)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        # perf_counter is monotonic; wall-clock adjustments cannot skew it
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # 303 redirects after form posts are normal flow and stay at INFO;
        # 404s are WARNING so broken links stand out
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        # Message for humans, `extra` fields for log processors that read
        # record attributes
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response

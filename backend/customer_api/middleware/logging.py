"""
Customer API — Request Logging Middleware
==========================================

What:  One access-log line per HTTP request: method, path, status, duration.
Why:   Shows who hit which route and how it ended (401/403/404 included)
       without logging bodies or Authorization headers.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, client IP, request ID
    ❌ Don't log: request body, bearer tokens, any other header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from customer_api.middleware.request_id import request_id_var

logger = logging.getLogger("customer_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level by status class:
        5xx → ERROR
        4xx → WARNING
        else → INFO
    """

    # Probed every few seconds by orchestrators; logging them drowns real traffic
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

"""
Customer API — Request ID Middleware
=====================================

What:  Assigns a correlation ID to each request and echoes it in the response.
Why:   Error bodies and log lines carry the same ID, so a client-reported
       failure can be found in the logs directly.
How:   Uses the client's X-Request-ID when present, else a short UUID; stores
       it in a ContextVar for exception handlers and the access logger.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

MAX_REQUEST_ID_LENGTH = 64


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Client-supplied IDs are capped before they reach logs and error bodies
        rid = (request.headers.get("X-Request-ID") or "")[:MAX_REQUEST_ID_LENGTH]
        if not rid:
            # 8 chars is enough for correlation and keeps log lines short
            rid = str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

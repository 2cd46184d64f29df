"""
Blog API - Request ID Middleware
================================

What:  Assigns a correlation id to each request and echoes it back in the
       `X-Request-ID` response header.
How:   Reuses a client-supplied `X-Request-ID` when present, otherwise
       generates a short UUID. The id is stored in a ContextVar so the access
       logger and exception handlers can read it without plumbing.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request id to the request state, the log context and the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars is enough to correlate log lines
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

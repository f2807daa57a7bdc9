"""
journal_daemon.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Reuses the caller's x-request-id or generates one
    - Binds request id, method and path into structlog contextvars
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # A caller-provided id keeps log lines correlated across services.
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            response: Response = await call_next(request)
        finally:
            # Context must not leak into the next request handled by this task.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# DAO log lines emitted during a request (e.g. `group_lookup`) carry the request id
# through `merge_contextvars` in `observability.logging.configure_logging`.

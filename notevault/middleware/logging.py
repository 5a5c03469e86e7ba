"""
NoteVault Backend — Request Logging Middleware
==============================================

What:  One access-log line per HTTP request.
How:   Times the rest of the stack and logs method, path, status, duration,
       request ID, client IP and, once the access guard has run, the
       authenticated user id.

Never logged: request bodies (passwords), the Authorization header, tokens.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notevault.middleware.request_id import request_id_var

logger = logging.getLogger("notevault.access")

# Probed by load balancers every few seconds
QUIET_PATHS = {"/health"}


def level_for_status(status_code: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log; skips QUIET_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        user_id = getattr(request.state, "user_id", None)
        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(elapsed_ms, 2),
            "client_ip": request.client.host if request.client else "unknown",
            "user_id": user_id,
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] "
            "from %(client_ip)s user=%(user)s",
            {**fields, "user": user_id if user_id is not None else "-"},
            extra=fields,
        )
        return response

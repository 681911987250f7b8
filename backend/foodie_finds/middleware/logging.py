"""
Foodie Finds API: Request Logging Middleware
==============================================

What:  One access log line per HTTP request.
How:   Measures the time spent downstream and logs method, path, status,
       duration, request id and client address under "foodie_finds.access".
       Level follows the status: 5xx → ERROR, 4xx → WARNING, else INFO.

Request bodies and headers are never logged. GET /health is skipped.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from foodie_finds.middleware.request_id import request_id_var

logger = logging.getLogger("foodie_finds.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs status and duration of each request, correlated by request id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path == "/health":
            return await call_next(request)

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

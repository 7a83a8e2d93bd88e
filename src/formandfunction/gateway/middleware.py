"""
REST Gateway Middleware
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 10 * 1024 * 1024


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: status - method path - latency"""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                f"{status} - {request.method} {request.url.path} - {latency_ms:.2f}ms",
                extra={"status": status, "method": request.method, "path": request.url.path},
            )


class BodyLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds the limit"""

    def __init__(self, app, max_body_bytes: int = MAX_BODY_BYTES):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_body_bytes:
            error = PayloadTooLargeError()
            logger.warning(f"Rejected {request.method} {request.url.path}: {declared} bytes")
            return JSONResponse(status_code=error.status_code, content=error.to_payload())
        return await call_next(request)

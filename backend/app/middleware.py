"""Request logging and API rate limiting middleware."""

import logging
import math
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.rate_limit import RateLimiter

logger = logging.getLogger("app.access")


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request: method, path, status, duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        path = request.url.path
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error("%s %s ERROR %.1f ms: %s", method, path, duration_ms, e)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(log_level, "%s %s %s %.1f ms", method, path, response.status_code, duration_ms)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests under `path_prefix` once a client exhausts its window."""

    def __init__(self, app, limiter: RateLimiter, path_prefix: str = "/api/"):
        super().__init__(app)
        self.limiter = limiter
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_ip = _client_ip(request)
        if not self.limiter.allow(client_ip):
            retry_after = math.ceil(self.limiter.retry_after(client_ip))
            logger.warning("Rate limit exceeded for %s on %s", client_ip, request.url.path)
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests, please try again later."},
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)

"""
Request logging and rate limiting for the URL signing endpoints
"""

import logging
import time
from collections import defaultdict, deque

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

UNLIMITED_PATHS = ("/api/v1/health", "/api/v1/", "/docs", "/openapi.json")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window request limit per client IP.

    Windows of clients idle for a whole period are dropped on a sweep that
    runs at most once per period.
    """

    def __init__(self, app, calls: int = 120, period: int = 60):
        super().__init__(app)
        self.calls = calls
        self.period = period
        self.clients = defaultdict(deque)
        self._last_sweep = time.monotonic()

    def _evict_stale(self, now: float) -> None:
        cutoff = now - self.period
        stale = [ip for ip, window in self.clients.items() if not window or window[-1] <= cutoff]
        for ip in stale:
            del self.clients[ip]
        self._last_sweep = now
        if stale:
            logger.debug("Evicted %d idle rate limit windows", len(stale))

    async def dispatch(self, request: Request, call_next):
        if request.url.path in UNLIMITED_PATHS:
            return await call_next(request)

        now = time.monotonic()
        if now - self._last_sweep >= self.period:
            self._evict_stale(now)

        client_ip = request.client.host if request.client is not None else "unknown"
        window = self.clients[client_ip]
        while window and window[0] <= now - self.period:
            window.popleft()

        if len(window) >= self.calls:
            logger.warning("Rate limit exceeded for IP: %s", client_ip)
            return JSONResponse(
                status_code=429,
                content={
                    "detail": {
                        "error": "Rate limit exceeded",
                        "details": f"Maximum {self.calls} requests per {self.period} seconds",
                    }
                },
            )

        window.append(now)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d in %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - start,
        )
        return response

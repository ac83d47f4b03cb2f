"""
Rate limiting middleware.
"""

import time
from typing import Callable, Dict, List

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from marketplace.config.logging import get_logger
from marketplace.infrastructure.monitoring.metrics import record_rate_limit_hit

logger = get_logger(__name__)


class RateLimiterMiddleware:
    """Per client IP sliding window rate limiting for FastAPI."""

    EXEMPT_PREFIXES = ("/health",)

    def __init__(self, app: FastAPI, max_requests: int, window_seconds: int, api_prefix: str = ""):
        self.app = app
        self.requests: Dict[str, List[float]] = {}
        self.last_sweep = 0.0
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.exempt_paths = tuple(f"{api_prefix}{p}" for p in self.EXEMPT_PREFIXES)
        self.add_rate_limiter()

    def add_rate_limiter(self) -> None:
        """Add rate limiting middleware."""

        @self.app.middleware("http")
        async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
            if request.url.path.startswith(self.exempt_paths):
                return await call_next(request)

            client_ip = request.client.host if request.client else "unknown"

            if not self.is_allowed(client_ip):
                logger.warning("Rate limit exceeded", client_ip=client_ip)
                record_rate_limit_hit()
                return JSONResponse(
                    status_code=429,
                    content={
                        "error": "Too many requests. Please try again later.",
                        "type": "rate_limited",
                    },
                    headers={"Retry-After": str(self.window_seconds)},
                )

            return await call_next(request)

    def is_allowed(self, client_ip: str, now: float = None) -> bool:
        """Check if client is within rate limit, counting this request if so."""
        now = time.time() if now is None else now
        if now - self.last_sweep >= self.window_seconds:
            self.evict_idle(now)

        recent = [
            req_time
            for req_time in self.requests.get(client_ip, [])
            if now - req_time < self.window_seconds
        ]
        if len(recent) >= self.max_requests:
            self.requests[client_ip] = recent
            return False

        recent.append(now)
        self.requests[client_ip] = recent
        return True

    def evict_idle(self, now: float) -> None:
        """Forget clients with no request inside the current window."""
        self.requests = {
            client_ip: times
            for client_ip, times in self.requests.items()
            if times and now - times[-1] < self.window_seconds
        }
        self.last_sweep = now

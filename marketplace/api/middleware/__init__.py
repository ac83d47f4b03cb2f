"""
API middleware package.
"""

from .error_handler import ErrorHandlerMiddleware
from .logging import LoggingMiddleware
from .rate_limiter import RateLimiterMiddleware

__all__ = ["ErrorHandlerMiddleware", "LoggingMiddleware", "RateLimiterMiddleware"]

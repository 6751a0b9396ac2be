"""Custom middlewares (dependency injection, throttling)."""

from .rate_limit import RateLimitMiddleware
from .services_middleware import ServicesMiddleware

__all__ = ["RateLimitMiddleware", "ServicesMiddleware"]

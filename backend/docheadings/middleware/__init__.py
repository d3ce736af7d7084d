"""Middleware components for request validation and protection."""

from docheadings.middleware.rate_limit import build_limiter, rate_limit_upload
from docheadings.middleware.size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestSizeLimitMiddleware",
    "build_limiter",
    "rate_limit_upload",
]

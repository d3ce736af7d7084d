"""Request body size limit middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from docheadings.config import settings
from docheadings.exceptions import FileTooLargeError
from docheadings.responses import error_response

logger = logging.getLogger(__name__)


def declared_size(request: Request) -> int | None:
    """Body size announced by Content-Length, or None if missing or malformed."""
    content_length = request.headers.get("content-length")
    if not content_length:
        return None
    try:
        return int(content_length)
    except ValueError:
        return None


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject uploads whose declared size exceeds the request cap.

    Runs before the multipart body is parsed, so oversized documents never
    reach the temporary upload directory. Requests without a usable
    Content-Length pass through; the upload route still caps the bytes it
    writes.
    """

    def __init__(self, app, max_size: int | None = None):
        super().__init__(app)
        self.max_size = max_size or settings.max_request_size_bytes

    async def dispatch(self, request: Request, call_next):
        size = declared_size(request)
        if size is not None and size > self.max_size:
            logger.warning(
                f"Rejected {request.method} {request.url.path}: {size} bytes (max: {self.max_size})"
            )
            return error_response(
                FileTooLargeError(f"Request body exceeds maximum size of {self.max_size} bytes")
            )
        return await call_next(request)

"""JSON error bodies shared by exception handlers and middleware."""

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from docheadings.exceptions import DocumentError


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


def error_response(exc: DocumentError) -> JSONResponse:
    """Render a processing error as ``{"error": ..., "message": ...}``.

    ``message`` is left out when the error has none.
    """
    content = ErrorResponse(error=exc.error, message=exc.message or None)
    return JSONResponse(
        status_code=exc.status_code,
        content=content.model_dump(exclude_none=True),
    )

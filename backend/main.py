import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docheadings.config import Settings, settings
from docheadings.exceptions import DocumentError
from docheadings.frontend import register_frontend
from docheadings.middleware import RequestSizeLimitMiddleware, build_limiter
from docheadings.responses import error_response
from docheadings.routes import health, upload
from docheadings.services.extraction import ExtractionService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


async def document_error_handler(request: Request, exc: DocumentError) -> JSONResponse:
    """Render processing errors as ``{"error": ..., "message": ...}``."""
    return error_response(exc)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the API. Settings are fixed for the lifetime of the app."""
    app_settings = app_settings or settings

    if app_settings.upload_dir is not None:
        app_settings.upload_dir.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Upload endpoint: /api/upload")
        yield

    app = FastAPI(
        title="docheadings API",
        description="Extract page counts and section headings from PDF and DOCX uploads",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Read-only per-process state, exposed to routes through dependencies
    app.state.settings = app_settings
    app.state.extraction_service = ExtractionService(app_settings.docx_chars_per_page)

    # Per-app limiter so each app honours its own rate limit settings
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(DocumentError, document_error_handler)

    # Reject oversized uploads before the body is read
    app.add_middleware(RequestSizeLimitMiddleware, max_size=app_settings.max_request_size_bytes)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(upload.router, prefix="/api", tags=["upload"])
    app.include_router(health.router, prefix="/api/health", tags=["health"])

    # Catch-all frontend route goes last
    register_frontend(app, app_settings.public_dir)

    return app


app = create_app()

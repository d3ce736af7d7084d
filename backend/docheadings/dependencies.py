"""FastAPI dependencies for per-process state built by the app factory."""

from fastapi import Request

from docheadings.config import Settings
from docheadings.services.extraction import ExtractionService


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_extraction_service(request: Request) -> ExtractionService:
    return request.app.state.extraction_service

"""Serve a prebuilt single-page frontend next to the API."""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)


def register_frontend(app: FastAPI, public_dir: Path) -> bool:
    """Serve files from ``public_dir`` with an ``index.html`` fallback.

    Must be called after the API routers are included, since the catch-all
    route would otherwise shadow them. The directory is checked once; if it
    does not exist nothing is registered.

    Returns:
        True if the frontend routes were registered
    """
    if not public_dir.is_dir():
        logger.info(f"No frontend found at {public_dir}, serving API only")
        return False

    root = public_dir.resolve()
    index_html = root / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        # Unknown API paths stay JSON 404s
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(404, "Not Found")

        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)

        if not index_html.is_file():
            raise HTTPException(404, "Not Found")
        return FileResponse(index_html)

    logger.info(f"Serving frontend from {root}")
    return True

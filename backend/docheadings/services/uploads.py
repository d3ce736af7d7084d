"""Scoped temporary storage for uploaded files."""

import logging
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import UploadFile

from docheadings.exceptions import FileTooLargeError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def temporary_upload(
    upload: UploadFile,
    max_size: int,
    upload_dir: Path | None = None,
    chunk_size: int = 1024 * 1024,
) -> AsyncIterator[Path]:
    """Write an upload to a temporary file and delete it on exit.

    The file is removed whether the body succeeds or raises, including when
    the upload turns out to exceed ``max_size`` while being written.

    Args:
        upload: Incoming multipart file
        max_size: Maximum accepted size in bytes
        upload_dir: Directory for the temporary file (system default if None)
        chunk_size: Read size when copying the upload

    Yields:
        Path of the temporary copy

    Raises:
        FileTooLargeError: If the upload exceeds max_size
    """
    suffix = Path(upload.filename or "").suffix.lower()
    with tempfile.NamedTemporaryFile(dir=upload_dir, suffix=suffix, delete=False) as tmp:
        path = Path(tmp.name)
    try:
        written = 0
        with path.open("wb") as out:
            while chunk := await upload.read(chunk_size):
                written += len(chunk)
                if written > max_size:
                    raise FileTooLargeError(
                        f"File exceeds maximum size of {max_size} bytes"
                    )
                out.write(chunk)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Error deleting temporary upload {path}: {e}")

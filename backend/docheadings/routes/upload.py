import logging
from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from docheadings.config import Settings
from docheadings.dependencies import get_extraction_service, get_settings
from docheadings.exceptions import (
    DocumentDecodeError,
    DocumentError,
    NoFileError,
    UnsupportedFileTypeError,
)
from docheadings.middleware import rate_limit_upload
from docheadings.responses import ErrorResponse
from docheadings.services.extraction import ExtractionService, ParsedText
from docheadings.services.headings import extract_headings
from docheadings.services.uploads import temporary_upload

logger = logging.getLogger(__name__)

router = APIRouter()


class UploadResponse(BaseModel):
    fileName: str
    totalPages: int
    headings: list[str]


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "No file or unsupported file type"},
    413: {"model": ErrorResponse, "description": "File too large"},
    429: {"model": ErrorResponse, "description": "Upload rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Document could not be parsed"},
}


def validate_upload(file: UploadFile | None, allowed_extensions: list[str]) -> str:
    """Check an upload is present and has an accepted extension.

    Returns:
        The original file name

    Raises:
        NoFileError: If no file was supplied
        UnsupportedFileTypeError: If the extension is not allowed
    """
    if file is None or not file.filename:
        raise NoFileError()

    extension = Path(file.filename).suffix.lower()
    if extension not in allowed_extensions:
        raise UnsupportedFileTypeError(f"Received '{extension or file.filename}'")
    return file.filename


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses=ERROR_RESPONSES,
    dependencies=[Depends(rate_limit_upload)],
)
async def upload_document(
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    extraction_service: ExtractionService = Depends(get_extraction_service),
):
    """Extract page count and probable section headings from a PDF or DOCX."""
    try:
        file_name = validate_upload(file, settings.allowed_extensions)
    except DocumentError as e:
        logger.warning(f"Rejected upload: {e.error} {e.message}".rstrip())
        raise

    async with temporary_upload(
        file,
        max_size=settings.max_upload_size_bytes,
        upload_dir=settings.upload_dir,
        chunk_size=settings.upload_chunk_size,
    ) as path:
        try:
            parsed: ParsedText = await run_in_threadpool(extraction_service.parse, path, file_name)
        except DocumentError:
            raise
        except Exception as e:
            logger.exception(f"Error processing file {file_name}")
            raise DocumentDecodeError(str(e)) from e

    headings = extract_headings(parsed.text)
    logger.info(
        f"Processed {file_name}: {parsed.page_count} pages, {len(headings)} headings",
        extra={"document_type": parsed.document_type.value},
    )

    return UploadResponse(
        fileName=file_name,
        totalPages=parsed.page_count,
        headings=headings,
    )

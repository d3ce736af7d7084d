"""PDF text extraction using pypdf."""

import logging
from pathlib import Path

from pypdf import PdfReader

from docheadings.enums import DocumentType
from docheadings.exceptions import DocumentDecodeError
from docheadings.services.extraction.models import ParsedText

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class PDFExtractor:
    """Extract text and the exact page count from PDFs."""

    def extract(self, path: Path) -> ParsedText:
        """
        Extract plain text from a PDF file.

        Args:
            path: PDF file on disk

        Returns:
            ParsedText with one text section per page, separated by a blank line

        Raises:
            DocumentDecodeError: If the file cannot be parsed as a PDF
        """
        try:
            reader = PdfReader(path)
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            logger.error(f"PDF extraction failed for {path.name}: {e}")
            raise DocumentDecodeError(str(e) or type(e).__name__) from e

        return ParsedText(
            document_type=DocumentType.PDF,
            page_count=len(pages),
            text=PAGE_SEPARATOR.join(pages),
        )

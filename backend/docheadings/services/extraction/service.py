"""Unified extraction service for the supported document types."""

import logging
from pathlib import Path

from docheadings.enums import DocumentType
from docheadings.exceptions import UnsupportedFileTypeError
from docheadings.services.extraction.models import ParsedText
from docheadings.services.extraction.pdf import PDFExtractor
from docheadings.services.extraction.word import DocxExtractor

logger = logging.getLogger(__name__)


class ExtractionService:
    """Route a document on disk to the decoder for its type."""

    EXTENSION_TYPES = {document_type.extension: document_type for document_type in DocumentType}

    def __init__(self, chars_per_page: int | None = None):
        self.pdf_extractor = PDFExtractor()
        self.docx_extractor = DocxExtractor(chars_per_page)

    def document_type(self, file_name: str) -> DocumentType | None:
        """Get the document type from a file name, ignoring extension case."""
        return self.EXTENSION_TYPES.get(Path(file_name).suffix.lower())

    def is_supported(self, file_name: str) -> bool:
        """Check if the file name has a supported extension."""
        return self.document_type(file_name) is not None

    def parse(self, path: Path, file_name: str) -> ParsedText:
        """
        Decode a document into plain text and a page count.

        Args:
            path: Where the document bytes are stored
            file_name: Original file name, used to pick the decoder

        Raises:
            UnsupportedFileTypeError: If the extension is not PDF or DOCX
            DocumentDecodeError: If the decoder fails
        """
        document_type = self.document_type(file_name)
        if document_type == DocumentType.PDF:
            return self.pdf_extractor.extract(path)
        if document_type == DocumentType.DOCX:
            return self.docx_extractor.extract(path)

        logger.warning(f"Refusing to parse unsupported file: {file_name}")
        raise UnsupportedFileTypeError(f"Unsupported file type: {Path(file_name).suffix or file_name}")

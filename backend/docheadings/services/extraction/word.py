"""Word (DOCX) raw text extraction using python-docx."""

import logging
import math
from pathlib import Path

import docx
from docx.table import Table

from docheadings.config import settings
from docheadings.enums import DocumentType
from docheadings.exceptions import DocumentDecodeError
from docheadings.services.extraction.models import ParsedText

logger = logging.getLogger(__name__)


def estimate_page_count(text: str, chars_per_page: int = 2500) -> int:
    """Estimate pages from character count.

    Empty text gives 0 pages; callers wanting a floor apply it themselves.
    """
    return math.ceil(len(text) / chars_per_page)


def _table_paragraphs(table: Table):
    """Yield paragraphs of every cell, row by row, including nested tables."""
    for row in table.rows:
        for cell in row.cells:
            for item in cell.iter_inner_content():
                if isinstance(item, Table):
                    yield from _table_paragraphs(item)
                else:
                    yield item


class DocxExtractor:
    """Extract raw text from Word documents.

    DOCX has no page concept, so the page count is estimated from the
    length of the extracted text.
    """

    def __init__(self, chars_per_page: int | None = None):
        self.chars_per_page = chars_per_page or settings.docx_chars_per_page

    def extract(self, path: Path) -> ParsedText:
        """
        Extract raw text from a DOCX file.

        Each paragraph (body or table cell) is followed by a blank line.
        Line breaks inside a paragraph come through as newlines.

        Raises:
            DocumentDecodeError: If the file is not a readable DOCX package
        """
        try:
            document = docx.Document(str(path))
            paragraphs = []
            for item in document.iter_inner_content():
                if isinstance(item, Table):
                    paragraphs.extend(p.text for p in _table_paragraphs(item))
                else:
                    paragraphs.append(item.text)
        except Exception as e:
            logger.error(f"DOCX extraction failed for {path.name}: {e}")
            raise DocumentDecodeError(str(e) or type(e).__name__) from e

        text = "".join(f"{paragraph}\n\n" for paragraph in paragraphs)
        return ParsedText(
            document_type=DocumentType.DOCX,
            page_count=estimate_page_count(text, self.chars_per_page),
            text=text,
        )

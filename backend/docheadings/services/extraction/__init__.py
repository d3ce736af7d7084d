"""Document text extraction services."""

from docheadings.services.extraction.word import DocxExtractor, estimate_page_count
from docheadings.services.extraction.models import ParsedText
from docheadings.services.extraction.pdf import PDFExtractor
from docheadings.services.extraction.service import ExtractionService

__all__ = [
    "DocxExtractor",
    "ExtractionService",
    "PDFExtractor",
    "ParsedText",
    "estimate_page_count",
]

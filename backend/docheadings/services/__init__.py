"""Document processing services (extraction, heading detection, upload storage)."""

from docheadings.services.extraction import (
    DocxExtractor,
    ExtractionService,
    ParsedText,
    PDFExtractor,
    estimate_page_count,
)
from docheadings.services.headings import (
    HeadingMatch,
    classify_line,
    detect_headings,
    extract_headings,
)
from docheadings.services.uploads import temporary_upload

__all__ = [
    # Extraction
    "DocxExtractor",
    "ExtractionService",
    "PDFExtractor",
    "ParsedText",
    "estimate_page_count",
    # Headings
    "HeadingMatch",
    "classify_line",
    "detect_headings",
    "extract_headings",
    # Uploads
    "temporary_upload",
]

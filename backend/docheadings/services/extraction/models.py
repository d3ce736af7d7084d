"""Data models for document extraction."""

from dataclasses import dataclass

from docheadings.enums import DocumentType


@dataclass
class ParsedText:
    """Plain text and page count decoded from a document."""

    document_type: DocumentType
    page_count: int
    text: str

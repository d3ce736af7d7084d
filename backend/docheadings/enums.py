"""Enums for values used throughout the application."""

from enum import StrEnum


class DocumentType(StrEnum):
    """Document formats accepted for upload."""

    PDF = "pdf"
    DOCX = "docx"

    @property
    def extension(self) -> str:
        return f".{self.value}"


class HeadingRule(StrEnum):
    """Heuristic that classified a line as a heading, in priority order."""

    ALL_CAPS = "all_caps"
    NUMBERED_SECTION = "numbered_section"
    SHORT_CAPITALIZED = "short_capitalized"

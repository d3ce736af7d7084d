"""Test configuration and fixtures."""

import io
import os
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

# Override settings before importing app modules
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from docx import Document
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from docheadings.config import Settings
from main import create_app


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _build_text_pdf(lines: list[str]) -> bytes:
    """Assemble a one-page PDF showing each line in Helvetica, top to bottom."""
    operations = ["BT", "/F1 18 Tf", "72 720 Td"]
    for index, line in enumerate(lines):
        if index:
            operations.append("0 -30 Td")
        operations.append(f"({_escape_pdf_text(line)}) Tj")
    operations.append("ET")
    stream = "\n".join(operations).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(b"%d 0 obj\n" % number + body + b"\nendobj\n")

    xref_offset = out.tell()
    out.write(b"xref\n0 %d\n" % (len(objects) + 1))
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(b"%010d 00000 n \n" % offset)
    out.write(
        b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n"
        % (len(objects) + 1, xref_offset)
    )
    return out.getvalue()


@pytest.fixture
def make_text_pdf() -> Callable[[list[str]], bytes]:
    """Factory for single-page PDFs containing the given text lines."""
    return _build_text_pdf


@pytest.fixture
def make_blank_pdf() -> Callable[[int], bytes]:
    """Factory for PDFs with the given number of empty pages."""

    def _build(pages: int) -> bytes:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=612, height=792)
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
    """Factory for DOCX files with the given paragraphs and optional table rows."""

    def _build(paragraphs: list[str], table_rows: list[list[str]] | None = None) -> bytes:
        document = Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table_rows:
            table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for row_index, row in enumerate(table_rows):
                for col_index, value in enumerate(row):
                    table.cell(row_index, col_index).text = value
        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Directory that receives temporary uploads; should be empty after every request."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(tmp_path: Path, upload_dir: Path) -> Settings:
    return Settings(
        upload_dir=upload_dir,
        public_dir=tmp_path / "no-frontend",
        rate_limit_enabled=False,
    )


@pytest.fixture
def test_app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

#!/usr/bin/env python3
"""Run heading extraction on local documents.

Usage:
    bin/extract_headings.py report.pdf              # Print fileName, totalPages, headings
    bin/extract_headings.py a.pdf b.docx            # One JSON object per file
    bin/extract_headings.py report.pdf --rules      # Include the rule each heading matched
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from docheadings.exceptions import DocumentError
from docheadings.services.extraction import ExtractionService
from docheadings.services.headings import detect_headings, extract_headings


def process_file(service: ExtractionService, path: Path, show_rules: bool = False) -> dict:
    """Parse one file and build the same payload as the upload endpoint."""
    parsed = service.parse(path, path.name)
    result = {
        "fileName": path.name,
        "totalPages": parsed.page_count,
        "headings": extract_headings(parsed.text),
    }
    if show_rules:
        rules: dict[str, str] = {}
        for match in detect_headings(parsed.text):
            rules.setdefault(match.text, match.rule.value)
        result["rules"] = rules
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract section headings from PDF/DOCX files")
    parser.add_argument("files", nargs="+", type=Path, help="PDF or DOCX files")
    parser.add_argument("--rules", action="store_true", help="Show which rule matched each heading")
    args = parser.parse_args(argv)

    service = ExtractionService()
    exit_code = 0

    for path in args.files:
        if not path.is_file():
            print(json.dumps({"fileName": path.name, "error": "File not found"}))
            exit_code = 1
            continue
        try:
            print(json.dumps(process_file(service, path, args.rules), indent=2))
        except DocumentError as e:
            payload = {"fileName": path.name, "error": e.error}
            if e.message:
                payload["message"] = e.message
            print(json.dumps(payload))
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Heading detection over raw extracted text.

Works purely on line text, with no knowledge of fonts or layout. Each line is
tested against three rules in priority order and classified by the first one
it satisfies:

1. All caps: ``INTRODUCTION``
2. Numbered section: ``1. Scope``, ``2.3.4. Results``, ``1.2 Background``
3. Short capitalized line without terminal punctuation, followed by a blank
   line or a lowercase-leading line: ``Overview``
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass

from docheadings.enums import HeadingRule

logger = logging.getLogger(__name__)

ALL_CAPS_MIN_LENGTH = 3  # Exclusive bounds
ALL_CAPS_MAX_LENGTH = 100
SHORT_HEADING_MIN_LENGTH = 3
SHORT_HEADING_MAX_LENGTH = 80

ALL_CAPS_PATTERN = re.compile(r"[A-Z\s]+")
# One or more "digits." groups of ASCII digits; the final group may omit its dot ("1.2 Background")
NUMBERED_SECTION_PATTERN = re.compile(r"[0-9]+\.(?:[0-9]+\.)*(?:[0-9]+)?\s+[A-Z]")
# Whitespace plus the byte order mark, which str.strip() keeps
EDGE_WHITESPACE_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
UPPERCASE_START_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_START_PATTERN = re.compile(r"[a-z]")
TERMINAL_PUNCTUATION = (".", "!", "?")


@dataclass(frozen=True)
class HeadingMatch:
    """A line classified as a heading, tagged with the rule that matched."""

    text: str
    rule: HeadingRule


def trim_line(line: str) -> str:
    """Strip surrounding whitespace, including a byte order mark."""
    return EDGE_WHITESPACE_PATTERN.sub("", line)


def is_all_caps_heading(line: str) -> bool:
    """Check for a line made only of uppercase letters and whitespace."""
    return (
        ALL_CAPS_MIN_LENGTH < len(line) < ALL_CAPS_MAX_LENGTH
        and line == line.upper()
        and ALL_CAPS_PATTERN.fullmatch(line) is not None
    )


def is_numbered_heading(line: str) -> bool:
    """Check for an outline-numbered line such as ``2.3. Method``."""
    return NUMBERED_SECTION_PATTERN.match(line) is not None


def is_short_capitalized_heading(line: str, next_line: str) -> bool:
    """Check for a short capitalized line that reads like a title.

    Args:
        line: Trimmed candidate line
        next_line: Trimmed line that follows it in the input, or "" at the end

    Returns:
        True if the candidate is followed by nothing, a blank line, or a line
        starting lowercase
    """
    if not SHORT_HEADING_MIN_LENGTH < len(line) < SHORT_HEADING_MAX_LENGTH:
        return False
    if UPPERCASE_START_PATTERN.match(line) is None or line.endswith(TERMINAL_PUNCTUATION):
        return False
    return not next_line or LOWERCASE_START_PATTERN.match(next_line) is not None


def classify_line(lines: list[str], index: int) -> HeadingMatch | None:
    """Classify ``lines[index]``, returning None when no rule matches.

    ``lines`` are the untrimmed input lines; the lookahead for the third rule
    reads ``lines[index + 1]`` from the same list.
    """
    line = trim_line(lines[index])
    if not line:
        return None

    if is_all_caps_heading(line):
        return HeadingMatch(line, HeadingRule.ALL_CAPS)

    if is_numbered_heading(line):
        return HeadingMatch(line, HeadingRule.NUMBERED_SECTION)

    next_line = trim_line(lines[index + 1]) if index + 1 < len(lines) else ""
    if is_short_capitalized_heading(line, next_line):
        return HeadingMatch(line, HeadingRule.SHORT_CAPITALIZED)

    return None


def detect_headings(text: str) -> list[HeadingMatch]:
    """Classify every line of ``text``, keeping duplicates and rule tags."""
    lines = text.split("\n")
    matches = []
    for index in range(len(lines)):
        match = classify_line(lines, index)
        if match is not None:
            matches.append(match)
    return matches


def extract_headings(text: str) -> list[str]:
    """Extract probable section headings from plain document text.

    Args:
        text: Full extracted document text, possibly empty

    Returns:
        Heading lines in order of first appearance, without duplicates
    """
    matches = detect_headings(text)
    if matches:
        counts = Counter(match.rule for match in matches)
        logger.debug(f"Heading candidates by rule: {dict(counts)}")
    return list(dict.fromkeys(match.text for match in matches))

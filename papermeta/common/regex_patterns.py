"""Regex patterns used by the bibliographic field extractors.

All patterns are compiled once at import time and shared read-only.
Tuples of patterns are tried in order; the first one that matches wins.
"""

import re
from typing import Pattern, Tuple


# Section headings that never start a title or an author line
SECTION_KEYWORD_PATTERN: Pattern[str] = re.compile(r'^(abstract|introduction|conclusion)', re.IGNORECASE)

# Title rejection patterns
NUMBERED_LIST_PATTERN: Pattern[str] = re.compile(r'^[0-9]+\.')
ALL_UPPERCASE_PATTERN: Pattern[str] = re.compile(r'^[A-Z\s]+$')

# "Firstname Lastname" at the start of a line
AUTHOR_NAME_PATTERN: Pattern[str] = re.compile(r'^[A-Z][a-z]+\s+[A-Z][a-z]+')

# Abstract body runs up to the introduction, the first numbered section or the keywords
ABSTRACT_PATTERN: Pattern[str] = re.compile(
    r'abstract\s*:?\s*(.*?)(?=introduction|1\.|keywords|key\s*words)',
    re.IGNORECASE | re.DOTALL
)

# [0-9] rather than \d: full-width digits are not dates or DOIs
DOI_PATTERN: Pattern[str] = re.compile(r'doi\s*:?\s*(10\.[0-9]+/\S+)', re.IGNORECASE)

DATE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'([0-9]{4})\s*年\s*([0-9]{1,2})\s*月'),
    re.compile(r'([0-9]{4})[-/]([0-9]{1,2})[-/]([0-9]{1,2})'),
    re.compile(r'([0-9]{4})\s+([0-9]{1,2})\s+([0-9]{1,2})'),
)

JOURNAL_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'published\s+in\s+([^,]+)', re.IGNORECASE),
    re.compile(r'journal\s+of\s+([^,]+)', re.IGNORECASE),
    re.compile(r'proceedings\s+of\s+([^,]+)', re.IGNORECASE),
)


def starts_with_section_keyword(line: str) -> bool:
    """Check whether a line opens with Abstract, Introduction or Conclusion."""
    return SECTION_KEYWORD_PATTERN.match(line) is not None


def first_match(patterns: Tuple[Pattern[str], ...], text: str):
    """
    Search `text` with each pattern in priority order.

    Returns:
        The match object of the first pattern that matches anywhere, or None
    """
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match
    return None

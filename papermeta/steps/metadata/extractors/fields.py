"""
Heuristic field extractors.

Each extractor is a plain function taking a NormalizedText and returning the
field value, or None (an empty tuple for authors) when its heuristic finds
nothing. They share no state and may run in any order.
"""

from datetime import date, timedelta
from typing import Callable, List, Optional, Tuple

from papermeta.common.regex_patterns import (
    ABSTRACT_PATTERN,
    ALL_UPPERCASE_PATTERN,
    AUTHOR_NAME_PATTERN,
    DATE_PATTERNS,
    DOI_PATTERN,
    JOURNAL_PATTERNS,
    NUMBERED_LIST_PATTERN,
    first_match,
    starts_with_section_keyword,
)
from papermeta.model.metadata import MAX_ABSTRACT_LENGTH, MAX_AUTHORS
from papermeta.steps.metadata.normalizer import NormalizedText

TITLE_SCAN_LINES = 10
AUTHOR_SCAN_LINES = 20

TITLE_MIN_LENGTH = 10  # exclusive
TITLE_MAX_LENGTH = 200  # exclusive


def _looks_like_title(line: str) -> bool:
    return (
        TITLE_MIN_LENGTH < len(line) < TITLE_MAX_LENGTH
        and not NUMBERED_LIST_PATTERN.match(line)
        and not starts_with_section_keyword(line)
        and not ALL_UPPERCASE_PATTERN.match(line)
        and " " in line
    )


def extract_title(normalized: NormalizedText) -> Optional[str]:
    """
    Return the first title-like line among the first 10 lines.

    A title-like line is 11 to 199 characters long, contains a space, and is
    neither a numbered list item, a section heading nor written in capitals.
    """
    for line in normalized.head(TITLE_SCAN_LINES):
        if _looks_like_title(line):
            return line
    return None


def extract_authors(normalized: NormalizedText) -> Tuple[str, ...]:
    """
    Collect lines among the first 20 that start with two capitalised words.

    The whole line is kept as one entry. At most MAX_AUTHORS entries are
    returned, in the order they appear.
    """
    authors = [
        line for line in normalized.head(AUTHOR_SCAN_LINES)
        if AUTHOR_NAME_PATTERN.match(line) and not starts_with_section_keyword(line)
    ]
    return tuple(authors[:MAX_AUTHORS])


def extract_abstract(normalized: NormalizedText) -> Optional[str]:
    match = ABSTRACT_PATTERN.search(normalized.text)
    if not match:
        return None
    return match.group(1).strip()[:MAX_ABSTRACT_LENGTH]


def extract_doi(normalized: NormalizedText) -> Optional[str]:
    """Return the bare DOI following a "doi" / "DOI:" label."""
    match = DOI_PATTERN.search(normalized.text)
    return match.group(1) if match else None


def _date_component(value: Optional[str]) -> int:
    # absent or zero components fall back to 1
    if value is None or not value.isdigit():
        return 1
    return int(value) or 1


def _build_date(year: int, month: int, day: int) -> Optional[date]:
    """
    Build a calendar date, rolling overflowing months and days forward.

    Month 13 of 2023 becomes January 2024 and 31 April becomes 1 May, so a
    matched but out-of-range component still yields a date near the text.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def extract_publication_date(normalized: NormalizedText) -> Optional[date]:
    """
    Find a publication date using, in priority order:

    1. ``YYYY年MM月`` (Japanese year/month notation)
    2. ``YYYY-MM-DD`` or ``YYYY/MM/DD``
    3. ``YYYY MM DD``

    The first pattern with a match anywhere in the text decides the result.
    """
    match = first_match(DATE_PATTERNS, normalized.text)
    if not match:
        return None

    groups = match.groups()
    year = int(groups[0])
    month = _date_component(groups[1] if len(groups) > 1 else None)
    day = _date_component(groups[2] if len(groups) > 2 else None)
    return _build_date(year, month, day)


def extract_journal(normalized: NormalizedText) -> Optional[str]:
    """Return the venue after "published in", "journal of" or "proceedings of", up to the next comma."""
    match = first_match(JOURNAL_PATTERNS, normalized.text)
    if not match:
        return None
    return match.group(1).strip() or None


FieldExtractor = Callable[[NormalizedText], object]

# (ExtractedMetadata field, extractor) pairs run by the assembler
FIELD_EXTRACTORS: List[Tuple[str, FieldExtractor]] = [
    ("title", extract_title),
    ("authors", extract_authors),
    ("abstract", extract_abstract),
    ("doi", extract_doi),
    ("publication_date", extract_publication_date),
    ("journal", extract_journal),
]

"""
Bibliographic field extractors.

One pure function per field, each scanning a NormalizedText with its own
pattern set from papermeta.common.regex_patterns:

- extract_title: first title-like line among the first 10 lines
- extract_authors: up to 5 "Firstname Lastname" lines among the first 20
- extract_abstract: text between "Abstract" and the introduction/keywords
- extract_doi: bare DOI following a "doi" label
- extract_publication_date: first date in priority order of three formats
- extract_journal: venue after "published in" / "journal of" / "proceedings of"

FIELD_EXTRACTORS lists them with the ExtractedMetadata field each one fills.
"""

from papermeta.steps.metadata.extractors.fields import (
    FIELD_EXTRACTORS,
    extract_abstract,
    extract_authors,
    extract_doi,
    extract_journal,
    extract_publication_date,
    extract_title,
)

__all__ = [
    "FIELD_EXTRACTORS",
    "extract_abstract",
    "extract_authors",
    "extract_doi",
    "extract_journal",
    "extract_publication_date",
    "extract_title",
]

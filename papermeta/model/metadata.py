"""Bibliographic metadata recovered from a paper's text."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

UNKNOWN_TITLE = "Unknown title"

MAX_AUTHORS = 5
MAX_ABSTRACT_LENGTH = 1000


@dataclass(frozen=True)
class ExtractedMetadata:
    """
    Result of running the field extractors over one document.

    `title` is never empty: it falls back to UNKNOWN_TITLE. `authors` is
    always a tuple, possibly empty. Every other field is None when its
    heuristic found nothing.
    """

    title: str = UNKNOWN_TITLE
    authors: Tuple[str, ...] = ()
    abstract: Optional[str] = None
    doi: Optional[str] = None
    publication_date: Optional[date] = None
    journal: Optional[str] = None

    @classmethod
    def degraded(cls) -> "ExtractedMetadata":
        """Result used when the document text could not be obtained at all."""
        return cls()

    @property
    def is_degraded(self) -> bool:
        return (
            self.title == UNKNOWN_TITLE
            and not self.authors
            and self.abstract is None
            and self.doi is None
            and self.publication_date is None
            and self.journal is None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "abstract": self.abstract,
            "doi": self.doi,
            "publication_date": self.publication_date.isoformat() if self.publication_date else None,
            "journal": self.journal,
        }

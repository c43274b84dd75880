"""Prepare raw document text for the line-scanning field extractors."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class NormalizedText:
    """
    Document text in the two shapes the extractors read.

    `text` is the full text as received, for patterns that span line breaks.
    `lines` keeps every line of it, trimmed, including empty ones so that
    positional heuristics ("first 10 lines") count the same lines as the source.
    """

    text: str
    lines: Tuple[str, ...]

    def head(self, count: int) -> Tuple[str, ...]:
        """First `count` lines."""
        return self.lines[:count]


def normalize_text(text: Union[str, bytes, None]) -> NormalizedText:
    """
    Split document text into trimmed lines.

    Bytes are decoded as UTF-8 with undecodable sequences replaced; any other
    non-text value is treated as an empty document.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    if not text or not isinstance(text, str):
        return NormalizedText(text="", lines=())
    return NormalizedText(text=text, lines=tuple(line.strip() for line in text.split("\n")))

"""
Entry point of the metadata extraction engine.

ExtractionPipeline turns the text of one paper into an ExtractedMetadata
value. It never raises: when the text itself cannot be produced (corrupted or
image-only PDF, unreadable file) it logs the failure and returns the degraded
result, so ingestion of the document can go on.
"""

import asyncio
import inspect
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from papermeta.logging import get_logger
from papermeta.model.metadata import ExtractedMetadata
from papermeta.steps.extraction.pdfs import read_pdf_text
from papermeta.steps.metadata.assembler import MetadataAssembler
from papermeta.steps.metadata.normalizer import normalize_text

RawText = Union[str, bytes, None]
TextSource = Union[Awaitable[RawText], Callable[[], Union[RawText, Awaitable[RawText]]]]


class ExtractionPipeline:

    def __init__(self, assembler: Optional[MetadataAssembler] = None, debug: bool = False):
        self.debug = debug
        self.assembler = assembler or MetadataAssembler(debug=debug)
        self.logger = get_logger(self.__class__.__name__)

    def extract(self, text: RawText) -> ExtractedMetadata:
        """
        Extract metadata from the full text of a document.

        Args:
            text: Plain text as produced by the PDF-to-text step; bytes are
                  decoded as UTF-8. None and
                  empty strings are accepted and give the degraded result.

        Returns:
            ExtractedMetadata with the sentinel title when no title was found
        """
        return self.assembler.assemble(normalize_text(text))

    async def _resolve(self, source: TextSource) -> RawText:
        if inspect.isawaitable(source):
            return await source
        result = source()
        if inspect.isawaitable(result):
            return await result
        return result

    async def extract_from_source(self, source: TextSource, label: str = "document") -> ExtractedMetadata:
        """
        Obtain the text from an upstream extractor, then extract metadata.

        Args:
            source: Awaitable, or zero-argument sync/async callable, producing
                    the document text
            label: Name used in log messages (usually the filename)

        Returns:
            ExtractedMetadata; the degraded value if `source` or the extraction raised
        """
        try:
            text = await self._resolve(source)
        except Exception as e:
            self.logger.warning(f"Text extraction failed for {label}, using degraded metadata: {str(e)}")
            return ExtractedMetadata.degraded()

        try:
            return self.extract(text)
        except Exception as e:
            self.logger.error(f"Metadata extraction failed for {label}, using degraded metadata: {str(e)}")
            return ExtractedMetadata.degraded()

    async def extract_from_pdf(self, file_path: Union[str, Path]) -> ExtractedMetadata:
        """Read a PDF with pdfplumber and extract its metadata."""
        return await self.extract_from_source(
            asyncio.to_thread(read_pdf_text, file_path),
            label=str(file_path),
        )

import asyncio
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from papermeta.logging import logger
from papermeta.model.document import Document


def read_pdf_text(file_path: Union[str, Path]) -> str:
    """Read the plain text of every page of a PDF.

    Raises whatever pdfplumber raises for unreadable or corrupted files.
    """
    with pdfplumber.open(file_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages)


class PdfExtractor:
    def __init__(self, document: Document):
        self.document = document

    async def extract_text(self) -> Optional[Document]:
        """Extract text from a single PDF file.

        Returns:
            Document object with extracted text if successful, None otherwise
        """
        try:
            content = await asyncio.to_thread(read_pdf_text, self.document.file_path)
            if not content.strip():
                logger.error(f"No text layer found in {self.document.file_path}")
                return None
            self.document.content = content
            return self.document
        except Exception as e:
            logger.error(f"Error in PDF extraction for {self.document.file_path}: {str(e)}")
            self.document.add_metadata("extraction_error", str(e))
            return None

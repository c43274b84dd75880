from typing import Optional

from papermeta.utils import read_file
from papermeta.logging import logger
from papermeta.model.document import Document

class TextExtractor:
    """Plain text and markdown files that already carry the paper's text."""

    def __init__(self, document: Document):
        self.document = document

    async def extract_text(self) -> Optional[Document]:
        """Extract text from a single text file.

        Returns:
            Document object with extracted text if successful, None otherwise
        """
        try:
            content = await read_file(self.document.file_path, 'r')
            if not content:
                logger.error(f"Failed to read file: {self.document.file_path}")
                return None

            self.document.content = content
            return self.document
        except Exception as e:
            logger.error(f"Error processing text file {self.document.file_path}: {e}")
            self.document.add_metadata("extraction_error", str(e))
            return None

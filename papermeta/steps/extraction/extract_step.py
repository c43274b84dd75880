from typing import List

from papermeta.base_step import PipelineStep
from papermeta.model.document import Document
from papermeta.steps.extraction.pdfs import PdfExtractor
from papermeta.steps.extraction.texts import TextExtractor

MAX_FILE_SIZE = 50 * 1024 * 1024  # 50 MB

TEXT_FORMATS = {"txt", "md"}


class ExtractionStep(PipelineStep):
    """
    Turns input files into text for the metadata step.

    Documents whose text cannot be obtained are kept, with an
    `extraction_error` entry, so later steps can still give them degraded
    metadata instead of dropping them.
    """

    def __init__(self, config: dict = None, name: str = None):
        super().__init__(config, name)
        self.max_file_size = self.config.get("max_file_size", MAX_FILE_SIZE)

    async def _pdf_extraction(self, document: Document) -> Document:
        pdf_extractor = PdfExtractor(document)
        return await pdf_extractor.extract_text()

    async def _text_extraction(self, document: Document) -> Document:
        text_extractor = TextExtractor(document)
        return await text_extractor.extract_text()

    def _check_size(self, document: Document) -> bool:
        if not document.file_path.exists():
            return True  # nothing to measure, the reader reports the failure
        size = document.file_path.stat().st_size
        if size > self.max_file_size:
            self.logger.warning(f"{document.filename} is {size} bytes, above the {self.max_file_size} byte limit")
            document.add_metadata("extraction_error", f"file exceeds {self.max_file_size} bytes")
            return False
        return True

    async def execute(self, documents: List[Document]) -> List[Document]:
        """Execute text extraction on input documents.

        Args:
            documents: Document objects pointing at the files to read

        Returns:
            The same documents, with `content` filled where extraction succeeded
        """
        unique_formats = {document.file_format for document in documents}
        self.logger.info(f"Extracting text from {unique_formats} files. File count: {len(documents)}")

        for document in documents:
            try:
                if not self._check_size(document):
                    continue

                if document.file_format == "pdf":
                    document_with_text = await self._pdf_extraction(document)
                elif document.file_format in TEXT_FORMATS:
                    document_with_text = await self._text_extraction(document)
                else:
                    self.logger.error(f"Unsupported format: {document.file_format}")
                    document.add_metadata("extraction_error", f"unsupported format: {document.file_format}")
                    continue

                if document_with_text and document_with_text.content_length > 1:
                    self.logger.info(f"Successfully extracted {document_with_text.content_length} characters from {document_with_text.filename}")
                else:
                    self.logger.warning(f"No text extracted from {document.filename}")
                    if not document.get_metadata("extraction_error"):
                        document.add_metadata("extraction_error", "no text extracted")
            except Exception as e:
                self.logger.error(f"Failed to extract text from {document.filename}: {str(e)}")
                document.add_metadata("extraction_error", str(e))
        return documents

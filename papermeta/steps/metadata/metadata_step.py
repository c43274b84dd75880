"""
Metadata extraction step for the papermeta pipeline.
"""

import asyncio
import json
from typing import List
from pathlib import Path

from papermeta.base_step import PipelineStep
from papermeta.model.document import Document
from papermeta.model.metadata import ExtractedMetadata
from papermeta.steps.metadata.extraction_pipeline import ExtractionPipeline

class MetadataStep(PipelineStep):
    """
    Runs the extraction pipeline over the text of each document.
    """

    def __init__(self, config: dict = None, name: str = None):
        """
        Initialize the metadata extraction step.

        Args:
            config: Configuration dictionary with options:
                - debug: Enable debug logging
                - export_metadata: Whether to append metadata to a JSONL file
                - metadata_destination: Directory to save metadata file
                - metadata_filename: Name of the metadata JSONL file
            name: Name for logging purposes
        """
        super().__init__(config, name)

        self.export_metadata = self.config.get("export_metadata", True)
        self.metadata_destination = Path(self.config.get("metadata_destination", "./output"))
        self.metadata_filename = self.config.get("metadata_filename", "metadata.jsonl")

        self.pipeline = ExtractionPipeline(debug=self.debug)

    async def _extract_metadata_for_document(self, document: Document) -> Document:
        """
        Extract metadata for a single document.

        Documents whose text extraction failed get the degraded metadata;
        the earlier `extraction_error` is left in place for the caller.
        """
        if document.get_metadata("extraction_error"):
            self.logger.warning(f"Using degraded metadata for {document.filename}: {document.get_metadata('extraction_error')}")
            document.extracted = ExtractedMetadata.degraded()
            return document

        try:
            document.extracted = self.pipeline.extract(document.content)
        except Exception as e:
            self.logger.error(f"Failed to extract metadata from {document.filename}: {str(e)}")
            document.extracted = ExtractedMetadata.degraded()
            document.add_metadata("extraction_error", str(e))
            return document

        if document.extracted.is_degraded:
            self.logger.warning(f"No metadata extracted from {document.filename}")
        else:
            self.logger.info(f"Successfully extracted metadata from {document.filename}")
            if self.debug:
                self.logger.debug(f"Extracted metadata: {document.extracted.to_dict()}")

        return document

    async def execute(self, documents: List[Document]) -> List[Document]:
        """
        Execute metadata extraction on input documents.

        Args:
            documents: List of Document objects with extracted text

        Returns:
            The same documents, each with `extracted` set
        """
        if not documents:
            self.logger.warning("No input documents provided to metadata step")
            return []

        self.logger.info(f"Extracting metadata from {len(documents)} documents")

        tasks = [
            self._extract_metadata_for_document(document)
            for document in documents
        ]
        processed = await asyncio.gather(*tasks, return_exceptions=True)

        result = []
        for i, outcome in enumerate(processed):
            if isinstance(outcome, Exception):
                self.logger.error(f"Exception processing {documents[i].filename}: {outcome}")
                documents[i].extracted = ExtractedMetadata.degraded()
                result.append(documents[i])
            else:
                result.append(outcome)

        successful_count = sum(1 for doc in result if not doc.extracted.is_degraded)
        self.logger.info(f"Successfully extracted metadata from {successful_count}/{len(result)} documents")

        if self.export_metadata:
            self._export_metadata_to_json(result)

        return result

    def _export_metadata_to_json(self, documents: List[Document]) -> None:
        """
        Append one JSON line per document to the metadata file.

        Args:
            documents: List of processed documents with metadata
        """
        if not self.metadata_destination.exists():
            self.logger.info(f"Creating metadata destination directory: {self.metadata_destination}")
            self.metadata_destination.mkdir(parents=True, exist_ok=True)

        metadata_file = self.metadata_destination / self.metadata_filename

        try:
            with open(metadata_file, 'a', encoding='utf-8') as f:
                for document in documents:
                    record = {
                        "filename": document.filename,
                        "file_path": str(document.file_path),
                        "file_format": document.file_format,
                        "content_length": document.content_length,
                        "metadata": document.extracted.to_dict(),
                        "degraded": document.extracted.is_degraded,
                    }
                    if document.get_metadata("extraction_error"):
                        record["extraction_error"] = document.get_metadata("extraction_error")
                    json.dump(record, f, ensure_ascii=False, default=str)
                    f.write('\n')

            self.logger.info(f"Exported metadata for {len(documents)} documents to: {metadata_file}")
        except Exception as e:
            self.logger.error(f"Failed to export metadata to {metadata_file}: {str(e)}")

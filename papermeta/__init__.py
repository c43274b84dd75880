"""papermeta: heuristic bibliographic metadata extraction for academic papers."""

from papermeta.model.metadata import UNKNOWN_TITLE, ExtractedMetadata
from papermeta.steps.metadata.extraction_pipeline import ExtractionPipeline

__all__ = ["ExtractionPipeline", "ExtractedMetadata", "UNKNOWN_TITLE"]

__version__ = "0.1.0"

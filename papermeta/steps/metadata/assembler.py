"""Runs every field extractor over one text and builds ExtractedMetadata."""

from typing import Any, Dict, List, Optional, Tuple

from papermeta.logging import get_logger
from papermeta.model.metadata import UNKNOWN_TITLE, ExtractedMetadata
from papermeta.steps.metadata.extractors.fields import FIELD_EXTRACTORS, FieldExtractor
from papermeta.steps.metadata.normalizer import NormalizedText


class MetadataAssembler:
    """
    Collects the output of the field extractors into one ExtractedMetadata.

    Extractors are independent, so they are simply called one after the other.
    A missing title is replaced with UNKNOWN_TITLE and missing authors with an
    empty tuple.
    """

    def __init__(self, extractors: Optional[List[Tuple[str, FieldExtractor]]] = None, debug: bool = False):
        self.extractors = extractors if extractors is not None else FIELD_EXTRACTORS
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)

    def _run_extractor(self, field_name: str, extractor: FieldExtractor, normalized: NormalizedText) -> Any:
        try:
            return extractor(normalized)
        except Exception as e:
            # one broken heuristic only costs its own field
            self.logger.error(f"Extractor for '{field_name}' failed: {str(e)}")
            return None

    def assemble(self, normalized: NormalizedText) -> ExtractedMetadata:
        fields: Dict[str, Any] = {}
        for field_name, extractor in self.extractors:
            value = self._run_extractor(field_name, extractor, normalized)
            if value is not None:
                fields[field_name] = value

        fields["title"] = fields.get("title") or UNKNOWN_TITLE
        fields["authors"] = tuple(fields.get("authors") or ())

        metadata = ExtractedMetadata(**fields)
        if self.debug:
            self.logger.debug(f"Assembled metadata: {metadata.to_dict()}")
        return metadata

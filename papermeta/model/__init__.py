from papermeta.model.document import Document
from papermeta.model.metadata import UNKNOWN_TITLE, ExtractedMetadata

__all__ = ["Document", "ExtractedMetadata", "UNKNOWN_TITLE"]

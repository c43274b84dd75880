"""Document object passed between papermeta pipeline steps."""

from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from papermeta.model.metadata import ExtractedMetadata


@dataclass
class Document:
    """
    A single input paper moving through the pipeline.

    `content` holds the plain text produced by the extraction step, `extracted`
    the bibliographic metadata recovered from it, and `metadata` any
    bookkeeping the steps record along the way (errors, sizes).
    """

    content: str
    file_path: Path
    file_format: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    extracted: Optional[ExtractedMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "file_path": str(self.file_path),
            "file_format": self.file_format,
            "metadata": self.metadata.copy(),
            "extracted": self.extracted.to_dict() if self.extracted else None,
        }

    def __hash__(self):
        return hash(self.file_path)

    def __eq__(self, other):
        return isinstance(other, Document) and self.file_path == other.file_path

    @property
    def filename(self) -> str:
        """Get the filename without path."""
        return self.file_path.name

    @property
    def content_length(self) -> int:
        return len(self.content)

    def is_empty(self) -> bool:
        """Check if the document content is empty."""
        return not self.content.strip()

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    @classmethod
    def from_path(cls, file_path: Path, file_format: Optional[str] = None, **metadata) -> "Document":
        """Create an empty Document for a file that still needs text extraction."""
        fmt = file_format or file_path.suffix.lstrip(".").lower()
        return cls(content="", file_path=file_path, file_format=fmt, metadata=metadata)

    def __str__(self) -> str:
        return f"Document({self.filename}, {self.file_format} format)"

    def __repr__(self) -> str:
        return f"Document(file_path={self.file_path}, format={self.file_format}, metadata_keys={list(self.metadata.keys())})"

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from papermeta.logging import get_logger
from papermeta.model.document import Document


class PipelineStep(ABC):
    """abstract base class for all pipeline steps."""

    def __init__(self, config: Optional[dict] = None, name: Optional[str] = None):
        """initialize the pipeline step.

        Args:
            config: Configuration specific to the step.
            name: Optional name for the step (used for logging).
        """
        self.config = config if config is not None else {}
        self.debug = self.config.get("debug", False) if isinstance(self.config, dict) else False
        self.logger = get_logger(name or self.__class__.__name__)

    @abstractmethod
    async def execute(self, documents: List[Document]) -> List[Document]:
        """Execute the pipeline step.

        Args:
            documents: Documents to process.

        Returns:
            Processed documents.
        """
        pass

    async def __call__(self, documents: List[Document]) -> Any:
        """shortway of calling `execute` method."""
        return await self.execute(documents)

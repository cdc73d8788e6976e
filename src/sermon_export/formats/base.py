"""Abstract base class for document encoders."""

from abc import ABC, abstractmethod
from pathlib import Path

from sermon_export.formatting.ir import DocumentModel


class DocumentEncoder(ABC):
    """Abstract base class for document encoders.

    Each encoder turns an assembled DocumentModel into the bytes of one
    file format. Encoders either return a complete buffer or raise;
    they never produce partial output.
    """

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the file extension this encoder produces (e.g. '.docx')."""
        ...

    @property
    def media_type(self) -> str:
        return "application/octet-stream"

    @abstractmethod
    def render(self, document: DocumentModel) -> bytes:
        """Encode the document model.

        Args:
            document: The assembled DocumentModel

        Returns:
            Complete file contents
        """
        ...

    def write(self, document: DocumentModel, path: Path) -> None:
        """Render and write the document to a file."""
        path.write_bytes(self.render(document))

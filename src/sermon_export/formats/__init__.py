"""Document encoders for Sermon Export."""

from sermon_export.formats.base import DocumentEncoder
from sermon_export.formats.docx_handler import DOCXEncoder
from sermon_export.formats.md_handler import MarkdownEncoder

__all__ = [
    "DocumentEncoder",
    "DOCXEncoder",
    "MarkdownEncoder",
    "UnsupportedFormatError",
    "get_encoder",
]

# Map file extensions to encoders
ENCODER_MAP: dict[str, type[DocumentEncoder]] = {
    ".docx": DOCXEncoder,
    ".md": MarkdownEncoder,
}

SUPPORTED_EXTENSIONS = tuple(ENCODER_MAP.keys())


class UnsupportedFormatError(ValueError):
    """Requested output format has no encoder."""


def get_encoder(extension: str) -> type[DocumentEncoder]:
    """Get the appropriate encoder class for a file extension."""
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    if ext not in ENCODER_MAP:
        raise UnsupportedFormatError(
            f"Unsupported output format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return ENCODER_MAP[ext]

"""Document assembly: three sections plus metadata into one model."""

import logging
import re
from datetime import date
from typing import Callable, Mapping, Optional, Union

from sermon_export.config import get_settings
from sermon_export.formats.base import DocumentEncoder
from sermon_export.formatting.ir import (
    DocumentModel,
    Section,
    SectionName,
    TextRun,
    TextStyle,
)
from sermon_export.formatting.parser import MarkdownParser
from sermon_export.core.models import ExportDescriptor

logger = logging.getLogger(__name__)

SectionText = Union[str, list[str]]

CREATOR = "My Preacher Helper"
DESCRIPTION = "Автоматически сгенерированный план проповеди"

# Everything outside Latin/Cyrillic letters and digits becomes a hyphen
FILENAME_UNSAFE_PATTERN = re.compile(r"[^A-Za-z0-9А-Яа-я]")


class ExportError(Exception):
    """Export failed; the original cause is chained as __cause__."""

    def __init__(self, message: str = "Failed to export sermon plan") -> None:
        super().__init__(message)


def slugify_title(title: str) -> str:
    """Replace each unsafe character with a hyphen and lower-case."""
    return FILENAME_UNSAFE_PATTERN.sub("-", title).lower()


def derive_filename(title: str, today: date, extension: str = ".docx") -> str:
    """Build '<slug>-<YYYY-MM-DD><extension>' from a sermon title."""
    return f"{slugify_title(title)}-{today.isoformat()}{extension}"


def split_verse(verse: Optional[str]) -> list[TextRun]:
    """Turn verse text into one italic run per non-blank line.

    Every run after the first forces a line break before it.
    """
    runs: list[TextRun] = []
    for line in (verse or "").split("\n"):
        line = line.strip()
        if not line:
            continue
        runs.append(
            TextRun(text=line, style=TextStyle.ITALIC, break_before=bool(runs))
        )
    return runs


class DocumentAssembler:
    """Assemble the three plan sections into a DocumentModel.

    Assembly is a pure computation over the inputs. The only
    non-deterministic input is the clock, read when the descriptor has
    no export date or filename.
    """

    def __init__(
        self,
        parser: Optional[MarkdownParser] = None,
        date_format: Optional[str] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            parser: Block parser (defaults to one using the configured placeholder)
            date_format: strftime pattern for the "today" fallback
            today: Clock returning the current date
        """
        settings = get_settings()
        self.parser = parser or MarkdownParser(
            placeholder_text=settings.placeholder_text
        )
        self.date_format = date_format or settings.date_format
        self.today = today or date.today

    def assemble(
        self,
        descriptor: ExportDescriptor,
        sections: Mapping[Union[SectionName, str], SectionText],
        extension: str = ".docx",
    ) -> DocumentModel:
        """Build the document model.

        Args:
            descriptor: Title, verse, date and filename override
            sections: Text for introduction, main and conclusion
            extension: File extension used for a derived filename

        Returns:
            DocumentModel with sections in introduction/main/conclusion order
        """
        texts = {SectionName(key): value for key, value in sections.items()}
        today = self.today()

        model = DocumentModel(
            title=descriptor.title,
            verse_runs=split_verse(descriptor.verse),
            export_date=descriptor.export_date or today.strftime(self.date_format),
            filename=descriptor.filename
            or derive_filename(descriptor.title, today, extension),
            metadata={
                "creator": CREATOR,
                "title": f"План проповеди: {descriptor.title}",
                "description": DESCRIPTION,
            },
        )

        for name in SectionName:
            model.sections.append(self._build_section(name, texts.get(name, "")))

        return model

    def _build_section(self, name: SectionName, text: SectionText) -> Section:
        if isinstance(text, str):
            blocks = self.parser.parse(text, accent=name.accent)
        else:
            lines = [line.strip() for line in text]
            blocks = self.parser.classify(
                [line for line in lines if line], accent=name.accent
            )
        logger.debug("Section %s: %d blocks", name.value, len(blocks))
        return Section(name=name, accent=name.accent, blocks=blocks)

    def export(
        self,
        descriptor: ExportDescriptor,
        sections: Mapping[Union[SectionName, str], SectionText],
        encoder: DocumentEncoder,
    ) -> tuple[DocumentModel, bytes]:
        """Assemble and encode in one step.

        Returns:
            The model and the complete encoded file contents

        Raises:
            ExportError: If model construction or encoding fails
        """
        try:
            model = self.assemble(descriptor, sections, extension=encoder.extension)
            data = encoder.render(model)
        except Exception as exc:
            logger.exception("Error exporting %r", descriptor.title)
            raise ExportError() from exc
        return model, data

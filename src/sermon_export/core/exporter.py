"""Export workflow: assemble, encode, save."""

import logging
from pathlib import Path
from typing import Optional

from sermon_export.config import get_settings
from sermon_export.core.assembler import DocumentAssembler, ExportError
from sermon_export.core.models import PlanData
from sermon_export.formats import DocumentEncoder, get_encoder

logger = logging.getLogger(__name__)


class PlanExporter:
    """Orchestrates the export pipeline.

    Pipeline:
    1. Assemble the plan sections into a DocumentModel
    2. Encode the model with the selected encoder
    3. Save the bytes under the derived or supplied filename

    The file is only written once encoding has fully succeeded.
    """

    def __init__(
        self,
        encoder: Optional[DocumentEncoder] = None,
        assembler: Optional[DocumentAssembler] = None,
    ) -> None:
        settings = get_settings()
        if encoder is None:
            encoder_class = get_encoder(settings.default_format)
            encoder = encoder_class()
        self.encoder = encoder
        self.assembler = assembler or DocumentAssembler()

    def export(
        self,
        plan: PlanData,
        output_dir: Optional[Path] = None,
        filename: Optional[str] = None,
    ) -> Path:
        """Export a plan to a file.

        Args:
            plan: The sermon plan
            output_dir: Target directory (defaults to configured output_dir)
            filename: Filename override, used verbatim

        Returns:
            Path of the written file

        Raises:
            ExportError: If assembly, encoding or saving fails
        """
        output_dir = output_dir or get_settings().output_dir

        model, data = self.assembler.export(
            plan.to_descriptor(filename=filename), plan.sections(), self.encoder
        )

        path = output_dir / model.filename
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            logger.exception("Error saving %s", path)
            if path.is_file():
                path.unlink()
            raise ExportError() from exc

        logger.info("Exported %s (%d bytes)", path, len(data))
        return path

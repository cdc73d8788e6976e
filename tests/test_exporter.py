"""Tests for the export workflow."""

from unittest.mock import Mock

import pytest

from sermon_export.core.assembler import DocumentAssembler, ExportError
from sermon_export.core.exporter import PlanExporter
from sermon_export.core.models import PlanData
from sermon_export.formats import DOCXEncoder, MarkdownEncoder


class TestPlanExporter:
    """Tests for the PlanExporter class."""

    def test_writes_markdown(
        self, tmp_path, assembler: DocumentAssembler, sample_plan: PlanData
    ):
        exporter = PlanExporter(encoder=MarkdownEncoder(), assembler=assembler)
        path = exporter.export(sample_plan, output_dir=tmp_path)

        assert path == tmp_path / "test-sermon-2024-01-15.md"
        assert "## ОСНОВНАЯ ЧАСТЬ" in path.read_text(encoding="utf-8")

    def test_writes_docx_with_filename_override(
        self, tmp_path, assembler: DocumentAssembler, sample_plan: PlanData
    ):
        exporter = PlanExporter(encoder=DOCXEncoder(), assembler=assembler)
        path = exporter.export(sample_plan, output_dir=tmp_path, filename="test-sermon.docx")

        assert path.name == "test-sermon.docx"
        assert path.read_bytes()[:2] == b"PK"

    def test_creates_output_dir(
        self, tmp_path, assembler: DocumentAssembler, sample_plan: PlanData
    ):
        target = tmp_path / "nested" / "exports"
        exporter = PlanExporter(encoder=MarkdownEncoder(), assembler=assembler)

        assert exporter.export(sample_plan, output_dir=target).parent == target

    def test_no_file_on_encoder_failure(
        self, tmp_path, assembler: DocumentAssembler, sample_plan: PlanData
    ):
        encoder = Mock(extension=".docx")
        encoder.render.side_effect = ValueError("broken encoder")
        exporter = PlanExporter(encoder=encoder, assembler=assembler)

        with pytest.raises(ExportError) as exc_info:
            exporter.export(sample_plan, output_dir=tmp_path)

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert list(tmp_path.iterdir()) == []

    def test_save_failure_wrapped(
        self, tmp_path, assembler: DocumentAssembler, sample_plan: PlanData
    ):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        exporter = PlanExporter(encoder=MarkdownEncoder(), assembler=assembler)

        with pytest.raises(ExportError) as exc_info:
            exporter.export(sample_plan, output_dir=blocker)

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_default_encoder_from_settings(self):
        assert isinstance(PlanExporter().encoder, DOCXEncoder)


class TestPlanData:
    """Tests for plan input parsing."""

    def test_camel_case_keys(self):
        plan = PlanData.model_validate(
            {"sermonTitle": "T", "sermonVerse": "V", "main": "m", "exportDate": "d"}
        )

        assert plan.sermon_title == "T"
        assert plan.to_descriptor().verse == "V"
        assert plan.to_descriptor().export_date == "d"
        assert plan.introduction == ""

    def test_snake_case_keys(self):
        plan = PlanData(sermon_title="T", conclusion="c")

        assert plan.sections()["conclusion"] == "c"

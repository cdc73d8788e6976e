"""Tests for document assembly."""

from datetime import date
from unittest.mock import Mock

import pytest

from sermon_export.core.assembler import (
    DocumentAssembler,
    ExportError,
    derive_filename,
    slugify_title,
    split_verse,
)
from sermon_export.core.models import ExportDescriptor
from sermon_export.formatting.ir import Heading, Paragraph, SectionName


class TestAssemble:
    """Tests for DocumentAssembler.assemble."""

    def test_empty_section_gets_placeholder(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        model = assembler.assemble(
            descriptor,
            {"introduction": "", "main": "Main text", "conclusion": "Text"},
        )

        intro = model.section(SectionName.INTRODUCTION)
        assert len(intro.blocks) == 1
        assert intro.blocks[0].placeholder is True
        assert intro.blocks[0].runs[0].italic is True

        main = model.section(SectionName.MAIN)
        assert main.blocks[0].plain_text == "Main text"
        assert main.blocks[0].placeholder is False
        assert model.section(SectionName.CONCLUSION).blocks[0].plain_text == "Text"

    def test_missing_section_gets_placeholder(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        model = assembler.assemble(descriptor, {"main": "Only main"})

        assert model.section(SectionName.CONCLUSION).blocks[0].placeholder is True

    def test_sections_in_fixed_order(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        model = assembler.assemble(
            descriptor, {"conclusion": "c", "introduction": "i", "main": "m"}
        )

        assert [s.name for s in model.sections] == [
            SectionName.INTRODUCTION,
            SectionName.MAIN,
            SectionName.CONCLUSION,
        ]
        assert [b.plain_text for b in model.blocks] == ["i", "m", "c"]

    def test_headings_use_section_accent(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        model = assembler.assemble(
            descriptor,
            {"introduction": "# A", "main": "## B", "conclusion": "### C"},
        )

        accents = [
            block.accent for block in model.blocks if isinstance(block, Heading)
        ]
        assert accents == ["d97706", "2563eb", "16a34a"]
        assert [s.accent for s in model.sections] == accents

    def test_section_lines_accepted(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        model = assembler.assemble(
            descriptor,
            {SectionName.MAIN: ["# Heading", "  ", "Body"]},
        )

        blocks = model.section(SectionName.MAIN).blocks
        assert isinstance(blocks[0], Heading)
        assert isinstance(blocks[1], Paragraph)
        assert len(blocks) == 2

    def test_export_date_supplied(self, assembler: DocumentAssembler):
        descriptor = ExportDescriptor(title="T", export_date="1 января 2024")
        model = assembler.assemble(descriptor, {})

        assert model.export_date == "1 января 2024"

    def test_export_date_defaults_to_today(self, assembler: DocumentAssembler):
        model = assembler.assemble(ExportDescriptor(title="T"), {})

        assert model.export_date == "15.01.2024"

    def test_metadata(self, assembler: DocumentAssembler, descriptor: ExportDescriptor):
        model = assembler.assemble(descriptor, {})

        assert model.metadata["creator"] == "My Preacher Helper"
        assert model.metadata["title"] == "План проповеди: Test Sermon"

    def test_inputs_not_mutated(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        sections = {"main": ["- a", "- b"]}
        assembler.assemble(descriptor, sections)

        assert sections == {"main": ["- a", "- b"]}


class TestFilename:
    """Tests for output filename derivation."""

    def test_supplied_filename_used_verbatim(self, assembler: DocumentAssembler):
        descriptor = ExportDescriptor(title="Ignored", filename="My Plan.DOCX")
        model = assembler.assemble(descriptor, {})

        assert model.filename == "My Plan.DOCX"

    def test_derived_from_title(self, assembler: DocumentAssembler):
        model = assembler.assemble(ExportDescriptor(title="Встреча #1!"), {})

        assert model.filename == "встреча--1--2024-01-15.docx"
        assert model.filename.startswith("встреча--1-")

    def test_extension_follows_encoder(self, assembler: DocumentAssembler):
        model = assembler.assemble(ExportDescriptor(title="Grace"), {}, extension=".md")

        assert model.filename == "grace-2024-01-15.md"

    def test_slugify_replaces_each_character(self):
        assert slugify_title("Test Sermon") == "test-sermon"
        assert slugify_title("A & B") == "a---b"
        assert slugify_title("Благодать") == "благодать"

    def test_derive_filename(self):
        assert derive_filename("Hope", date(2025, 3, 9), ".docx") == "hope-2025-03-09.docx"


class TestSplitVerse:
    """Tests for verse line splitting."""

    def test_blank_lines_dropped(self):
        runs = split_verse("John 1:1\n\nJohn 1:2")

        assert [r.text for r in runs] == ["John 1:1", "John 1:2"]
        assert runs[0].break_before is False
        assert runs[1].break_before is True

    def test_lines_trimmed_and_italic(self):
        runs = split_verse("  Psalm 23:1  \n")

        assert len(runs) == 1
        assert runs[0].text == "Psalm 23:1"
        assert runs[0].italic is True

    def test_no_verse(self):
        assert split_verse(None) == []
        assert split_verse("  \n ") == []


class TestExport:
    """Tests for DocumentAssembler.export error handling."""

    def test_returns_model_and_bytes(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        encoder = Mock(extension=".bin")
        encoder.render.return_value = b"data"

        model, data = assembler.export(descriptor, {"main": "x"}, encoder)

        assert data == b"data"
        assert model.filename.endswith(".bin")
        encoder.render.assert_called_once_with(model)

    def test_encoder_failure_wrapped(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        cause = RuntimeError("Export failed")
        encoder = Mock(extension=".docx")
        encoder.render.side_effect = cause

        with pytest.raises(ExportError, match="Failed to export") as exc_info:
            assembler.export(descriptor, {"main": "x"}, encoder)

        assert exc_info.value.__cause__ is cause

    def test_bad_section_name_wrapped(
        self, assembler: DocumentAssembler, descriptor: ExportDescriptor
    ):
        encoder = Mock(extension=".docx")

        with pytest.raises(ExportError) as exc_info:
            assembler.export(descriptor, {"epilogue": "x"}, encoder)

        assert isinstance(exc_info.value.__cause__, ValueError)
        encoder.render.assert_not_called()

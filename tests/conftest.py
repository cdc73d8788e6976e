"""Pytest fixtures for Sermon Export tests."""

from datetime import date

import pytest

from sermon_export.core.assembler import DocumentAssembler
from sermon_export.core.models import ExportDescriptor, PlanData
from sermon_export.formatting.parser import MarkdownParser

FIXED_TODAY = date(2024, 1, 15)


@pytest.fixture
def parser() -> MarkdownParser:
    """Create a parser instance."""
    return MarkdownParser()


@pytest.fixture
def assembler() -> DocumentAssembler:
    """Assembler with a fixed clock."""
    return DocumentAssembler(date_format="%d.%m.%Y", today=lambda: FIXED_TODAY)


@pytest.fixture
def descriptor() -> ExportDescriptor:
    return ExportDescriptor(title="Test Sermon", verse="John 3:16")


@pytest.fixture
def sample_plan() -> PlanData:
    """Plan covering headings, lists, quotes and a table."""
    return PlanData(
        sermonTitle="Test Sermon",
        sermonVerse="John 3:16",
        introduction="## Intro Heading\nThis is the introduction.\n- Point 1\n- Point 2",
        main=(
            "# Main Heading\n"
            "This is the **main** content.\n"
            "1. First point\n"
            "2. Second point\n"
            "| Word | Meaning |\n"
            "|------|---------|\n"
            "| agape | love |"
        ),
        conclusion="This is the conclusion.\n> Important quote\n---",
        exportDate="1 января 2024",
    )

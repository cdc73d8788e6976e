"""Formatting utilities for parsing section text into the document model."""

from sermon_export.formatting.ir import (
    TextStyle,
    TextRun,
    Heading,
    BulletItem,
    NumberedItem,
    Blockquote,
    Rule,
    Cell,
    Row,
    Table,
    Paragraph,
    BlockElement,
    SectionName,
    Section,
    DocumentModel,
)
from sermon_export.formatting.inline import InlineFormatter, format_inline
from sermon_export.formatting.tables import parse_table
from sermon_export.formatting.parser import MarkdownParser

__all__ = [
    "TextStyle",
    "TextRun",
    "Heading",
    "BulletItem",
    "NumberedItem",
    "Blockquote",
    "Rule",
    "Cell",
    "Row",
    "Table",
    "Paragraph",
    "BlockElement",
    "SectionName",
    "Section",
    "DocumentModel",
    "InlineFormatter",
    "format_inline",
    "parse_table",
    "MarkdownParser",
]

"""Markdown parser for converting section text to block elements."""

import re
from typing import Optional

from sermon_export.formatting.inline import InlineFormatter
from sermon_export.formatting.ir import (
    BlockElement,
    Blockquote,
    BulletItem,
    Heading,
    NumberedItem,
    Paragraph,
    Rule,
    TextRun,
    TextStyle,
)
from sermon_export.formatting.tables import is_table_line, parse_table

PLACEHOLDER_TEXT = "Содержание будет добавлено позже..."


class MarkdownParser:
    """Classify section lines into structured block elements.

    Supports a fixed subset of markdown: three heading levels, bullet and
    numbered items, blockquotes, rules, pipe tables and paragraphs.
    Malformed input never raises; it degrades to paragraphs.
    """

    # Order matters: longest heading prefix first
    HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))
    BULLET_PREFIXES = ("- ", "* ")
    NUMBERED_PATTERN = re.compile(r"^(\d+)\.\s(.*)$")
    BLOCKQUOTE_PREFIX = "> "
    RULE_LINES = ("---", "***")

    # Book name, chapter:verse, then a colon ("Иоанна 3:16: ...")
    SCRIPTURE_PATTERN = re.compile(r"^[А-Яа-я\w\s]+\s+\d+:\d+:")

    def __init__(
        self,
        formatter: Optional[InlineFormatter] = None,
        placeholder_text: str = PLACEHOLDER_TEXT,
    ) -> None:
        self.formatter = formatter or InlineFormatter()
        self.placeholder_text = placeholder_text

    def parse(self, content: str, accent: Optional[str] = None) -> list[BlockElement]:
        """Convert a section's raw text to block elements.

        Args:
            content: Raw section text, newline separated
            accent: Accent color applied to headings in this section

        Returns:
            Block elements in source order, or a single placeholder
            paragraph when the text has no visible content
        """
        lines = [line.strip() for line in (content or "").split("\n")]
        return self.classify([line for line in lines if line], accent)

    def classify(
        self, lines: list[str], accent: Optional[str] = None
    ) -> list[BlockElement]:
        """Classify pre-split, trimmed, non-blank lines.

        One element per line, except a pipe-line group that forms a
        table, which collapses into a single Table.
        """
        lines = [line for line in lines if line.strip()]
        if not lines:
            return [self.placeholder()]

        blocks: list[BlockElement] = []
        i = 0

        while i < len(lines):
            line = lines[i].strip()

            if is_table_line(line):
                end = i
                while end < len(lines) and is_table_line(lines[end]):
                    end += 1
                table = parse_table([row.strip() for row in lines[i:end]])
                if table is not None:
                    blocks.append(table)
                    i = end
                    continue

            blocks.append(self.classify_line(line, accent))
            i += 1

        return blocks

    def classify_line(self, line: str, accent: Optional[str] = None) -> BlockElement:
        """Classify a single line; the first matching rule wins."""
        for prefix, level in self.HEADING_PREFIXES:
            if line.startswith(prefix):
                return Heading(
                    level=level,
                    runs=self.formatter.format(line[len(prefix):]),
                    accent=accent,
                )

        if line.startswith(self.BULLET_PREFIXES):
            return BulletItem(runs=self.formatter.format(line[2:]))

        numbered = self.NUMBERED_PATTERN.match(line)
        if numbered:
            return NumberedItem(
                index=int(numbered.group(1)),
                runs=self.formatter.format(numbered.group(2)),
            )

        if line.startswith(self.BLOCKQUOTE_PREFIX):
            return Blockquote(runs=self.formatter.format(line[2:]))

        if line in self.RULE_LINES:
            return Rule()

        return Paragraph(
            runs=self.formatter.format(line),
            indented=self.is_scripture_reference(line),
        )

    def is_scripture_reference(self, line: str) -> bool:
        """Check if a line starts like a Bible reference ("John 3:16:")."""
        return bool(self.SCRIPTURE_PATTERN.match(line))

    def placeholder(self) -> Paragraph:
        """Italic stand-in for a section with no content."""
        return Paragraph(
            runs=[TextRun(text=self.placeholder_text, style=TextStyle.ITALIC)],
            placeholder=True,
        )


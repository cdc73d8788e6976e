"""Intermediate Representation for exported sermon plans.

This module defines the data structures that bridge the markdown-like
section text to format-specific rendering. The IR is encoder-agnostic:
any DocumentEncoder can walk it without knowing how it was parsed.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Optional, Union


class TextStyle(Flag):
    """Inline styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    STRIKE = auto()
    CODE = auto()
    SUPERSCRIPT = auto()
    SUBSCRIPT = auto()


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content (markers already stripped)
        style: Combined style flags
        break_before: Force a line break before this run (verse lines)
    """

    text: str
    style: TextStyle = TextStyle.NONE
    break_before: bool = False

    @property
    def bold(self) -> bool:
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        return TextStyle.ITALIC in self.style

    @property
    def strike(self) -> bool:
        return TextStyle.STRIKE in self.style

    @property
    def code(self) -> bool:
        return TextStyle.CODE in self.style

    @property
    def superscript(self) -> bool:
        return TextStyle.SUPERSCRIPT in self.style

    @property
    def subscript(self) -> bool:
        return TextStyle.SUBSCRIPT in self.style

    def __str__(self) -> str:
        return self.text


def plain_text(runs: list[TextRun]) -> str:
    """Join run texts without styling."""
    return "".join(run.text for run in runs)


# =============================================================================
# Block elements
# =============================================================================

@dataclass
class Heading:
    """A level 1-3 heading tinted with its section's accent."""

    level: int
    runs: list[TextRun] = field(default_factory=list)
    accent: Optional[str] = None

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass
class BulletItem:
    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass
class NumberedItem:
    """A numbered list item.

    The index is taken verbatim from the source line and is never
    renumbered against its neighbours.
    """

    index: int
    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass
class Blockquote:
    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass
class Rule:
    """Decorative separator line."""


@dataclass
class Cell:
    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass
class Row:
    cells: list[Cell] = field(default_factory=list)


@dataclass
class Table:
    """A pipe-delimited table.

    Rows may be jagged; encoders must tolerate differing cell counts.
    The first row is the header row.
    """

    rows: list[Row] = field(default_factory=list)

    @property
    def header(self) -> Optional[Row]:
        return self.rows[0] if self.rows else None

    @property
    def column_count(self) -> int:
        """Widest row's cell count."""
        return max((len(row.cells) for row in self.rows), default=0)


@dataclass
class Paragraph:
    """A plain paragraph.

    Attributes:
        runs: Styled runs making up the paragraph
        indented: Scripture-reference lines get the list-item indent
        placeholder: Stand-in text for an empty section
    """

    runs: list[TextRun] = field(default_factory=list)
    indented: bool = False
    placeholder: bool = False

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


BlockElement = Union[
    Heading, BulletItem, NumberedItem, Blockquote, Rule, Table, Paragraph
]


# =============================================================================
# Sections and the assembled document
# =============================================================================

class SectionName(str, Enum):
    """The three named parts of a sermon plan."""

    INTRODUCTION = "introduction"
    MAIN = "main"
    CONCLUSION = "conclusion"

    @property
    def accent(self) -> str:
        """Fixed accent color (hex, no leading '#')."""
        return SECTION_ACCENTS[self]

    @property
    def display_title(self) -> str:
        """Heading printed above the section body."""
        return SECTION_TITLES[self]


SECTION_ACCENTS: dict[SectionName, str] = {
    SectionName.INTRODUCTION: "d97706",  # Amber
    SectionName.MAIN: "2563eb",          # Blue
    SectionName.CONCLUSION: "16a34a",    # Green
}

SECTION_TITLES: dict[SectionName, str] = {
    SectionName.INTRODUCTION: "ВСТУПЛЕНИЕ",
    SectionName.MAIN: "ОСНОВНАЯ ЧАСТЬ",
    SectionName.CONCLUSION: "ЗАКЛЮЧЕНИЕ",
}


@dataclass
class Section:
    """One named section with its classified blocks."""

    name: SectionName
    accent: str
    blocks: list[BlockElement] = field(default_factory=list)


@dataclass
class DocumentModel:
    """Complete sermon plan ready for an encoder.

    Attributes:
        title: Sermon title
        verse_runs: One run per non-blank verse line
        export_date: Pre-formatted date string printed under the title
        filename: Output filename (derived or caller-supplied)
        sections: Introduction, main and conclusion, in that order
        metadata: Core document properties (creator, title, description)
    """

    title: str
    verse_runs: list[TextRun] = field(default_factory=list)
    export_date: str = ""
    filename: str = ""
    sections: list[Section] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def section(self, name: SectionName) -> Section:
        """Look up a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    @property
    def blocks(self) -> list[BlockElement]:
        """All blocks in reading order across sections."""
        return [block for section in self.sections for block in section.blocks]

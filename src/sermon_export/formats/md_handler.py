"""Markdown (.md) encoder."""

from sermon_export.formats.base import DocumentEncoder
from sermon_export.formatting.ir import (
    BlockElement,
    Blockquote,
    BulletItem,
    DocumentModel,
    Heading,
    NumberedItem,
    Paragraph,
    Rule,
    Table,
    TextRun,
)


def render_run(run: TextRun) -> str:
    """Wrap a run's text in markdown markers for its style."""
    text = run.text
    if not text:
        return text

    if run.code:
        text = f"`{text}`"
    if run.superscript:
        text = f"^{text}^"
    if run.subscript:
        text = f"~{text}~"
    if run.strike:
        text = f"~~{text}~~"

    if run.bold and run.italic:
        text = f"***{text}***"
    elif run.bold:
        text = f"**{text}**"
    elif run.italic:
        text = f"*{text}*"

    return text


def render_runs(runs: list[TextRun]) -> str:
    return "".join(render_run(run) for run in runs)


def render_blocks(blocks: list[BlockElement]) -> list[str]:
    """Render block elements as markdown lines."""
    lines: list[str] = []

    for block in blocks:
        if isinstance(block, Heading):
            lines.append(f"{'#' * block.level} {render_runs(block.runs)}")
        elif isinstance(block, BulletItem):
            lines.append(f"- {render_runs(block.runs)}")
        elif isinstance(block, NumberedItem):
            lines.append(f"{block.index}. {render_runs(block.runs)}")
        elif isinstance(block, Blockquote):
            lines.append(f"> {render_runs(block.runs)}")
        elif isinstance(block, Rule):
            lines.append("---")
        elif isinstance(block, Table):
            for row_index, row in enumerate(block.rows):
                cells = " | ".join(render_runs(cell.runs) for cell in row.cells)
                lines.append(f"| {cells} |")
                if row_index == 0:
                    lines.append("|" + " --- |" * len(row.cells))
        elif isinstance(block, Paragraph):
            lines.append(render_runs(block.runs))
        else:
            raise TypeError(f"Unknown block element: {type(block).__name__}")

    return lines


class MarkdownEncoder(DocumentEncoder):
    """Encoder for markdown (.md) previews.

    Re-emits the document model as markdown so an export can be read in
    any text editor or diffed against the source sections.
    """

    @property
    def extension(self) -> str:
        return ".md"

    @property
    def media_type(self) -> str:
        return "text/markdown"

    def render(self, document: DocumentModel) -> bytes:
        lines: list[str] = [f"# {document.title}"]

        for run in document.verse_runs:
            lines.append(f"*{run.text}*")
        if document.export_date:
            lines.append(document.export_date)

        for section in document.sections:
            lines.append("")
            lines.append(f"## {section.name.display_title}")
            lines.append("")
            lines.extend(render_blocks(section.blocks))

        return ("\n".join(lines) + "\n").encode("utf-8")

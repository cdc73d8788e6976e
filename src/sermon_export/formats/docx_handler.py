"""Microsoft Word (.docx) encoder."""

import logging
from io import BytesIO
from typing import Optional

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from sermon_export.config import get_settings
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
    Section,
    SectionName,
    Table,
    TextRun,
)

logger = logging.getLogger(__name__)


# Color definitions (hex, no leading '#')
DEFAULT_HEADING_COLOR = "374151"  # Slate
VERSE_COLOR = "6b7280"            # Grey
PLACEHOLDER_COLOR = "666666"
RULE_COLOR = "e5e7eb"             # Light grey
TABLE_BORDER_COLOR = "d1d5db"
TABLE_HEADER_FILL = "f8f9fa"

HEADING_SIZES = {1: Pt(12), 2: Pt(11), 3: Pt(10)}
SECTION_TITLE_SIZE = Pt(14)
SCRIPT_SIZE = Pt(8)
LIST_INDENT = Inches(0.5)
RULE_TEXT = "━" * 52
CODE_FONT = "Courier New"


class DOCXEncoder(DocumentEncoder):
    """Encoder for Microsoft Word (.docx) files.

    Uses python-docx to lay the plan out on a landscape page in two
    columns, with run-level formatting for every inline style.
    """

    def __init__(self, font_name: Optional[str] = None) -> None:
        self.font_name = font_name or get_settings().font_name

    @property
    def extension(self) -> str:
        return ".docx"

    @property
    def media_type(self) -> str:
        return (
            "application/vnd.openxmlformats-officedocument."
            "wordprocessingml.document"
        )

    def render(self, document: DocumentModel) -> bytes:
        """Build the Word document and return its bytes."""
        doc = Document()

        style = doc.styles["Normal"]
        style.font.name = self.font_name
        style.font.size = Pt(11)

        self._set_core_properties(doc, document.metadata)
        self._set_page_layout(doc)

        self._add_title(doc, document)
        for section in document.sections:
            self._add_section(doc, section)

        buffer = BytesIO()
        doc.save(buffer)
        logger.debug(
            "Rendered %s with %d blocks", document.filename, len(document.blocks)
        )
        return buffer.getvalue()

    def _set_core_properties(self, doc: Document, metadata: dict) -> None:
        props = doc.core_properties
        props.author = metadata.get("creator", "")
        props.title = metadata.get("title", "")
        props.comments = metadata.get("description", "")

    def _set_page_layout(self, doc: Document) -> None:
        """Landscape Letter, minimal margins, two equal columns."""
        section = doc.sections[0]
        section.orientation = WD_ORIENT.LANDSCAPE
        section.page_width = Inches(11)
        section.page_height = Inches(8.5)
        for side in ("top_margin", "right_margin", "bottom_margin", "left_margin"):
            setattr(section, side, Inches(0.2))

        sectPr = section._sectPr
        cols = sectPr.find(qn("w:cols"))
        if cols is None:
            cols = OxmlElement("w:cols")
            sectPr.append(cols)
        cols.set(qn("w:num"), "2")
        cols.set(qn("w:space"), "300")
        cols.set(qn("w:equalWidth"), "1")

    def _add_title(self, doc: Document, document: DocumentModel) -> None:
        """Add title, verse lines and export date."""
        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = title.add_run(document.title)
        run.bold = True
        run.font.size = SECTION_TITLE_SIZE
        run.font.color.rgb = RGBColor.from_string(SectionName.MAIN.accent.upper())

        if document.verse_runs:
            verse = doc.add_paragraph()
            verse.alignment = WD_ALIGN_PARAGRAPH.CENTER
            for run_data in document.verse_runs:
                run = verse.add_run()
                if run_data.break_before:
                    run.add_break()
                run.add_text(run_data.text)
                run.italic = True
                run.font.size = Pt(11)
                run.font.color.rgb = RGBColor.from_string(VERSE_COLOR.upper())

        if document.export_date:
            date_para = doc.add_paragraph()
            date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = date_para.add_run(document.export_date)
            run.font.size = Pt(9)
            run.font.color.rgb = RGBColor.from_string(VERSE_COLOR.upper())

    def _add_section(self, doc: Document, section: Section) -> None:
        """Add the section heading bar followed by its blocks."""
        header = doc.add_paragraph()
        self._set_paragraph_border(header, "bottom")
        header.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = header.add_run(section.name.display_title)
        run.bold = True
        run.font.size = SECTION_TITLE_SIZE
        run.font.color.rgb = RGBColor.from_string(section.accent.upper())

        for block in section.blocks:
            self._add_block(doc, block)

    def _add_block(self, doc: Document, block: BlockElement) -> None:
        if isinstance(block, Heading):
            self._add_heading(doc, block)
        elif isinstance(block, BulletItem):
            para = self._add_list_paragraph(doc, "• ")
            self._add_runs(para, block.runs)
        elif isinstance(block, NumberedItem):
            para = self._add_list_paragraph(doc, f"{block.index}. ")
            self._add_runs(para, block.runs)
        elif isinstance(block, Blockquote):
            para = doc.add_paragraph()
            self._set_paragraph_border(para, "left")
            para.paragraph_format.left_indent = LIST_INDENT
            self._add_runs(para, block.runs)
        elif isinstance(block, Rule):
            para = doc.add_paragraph()
            para.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = para.add_run(RULE_TEXT)
            run.font.color.rgb = RGBColor.from_string(RULE_COLOR.upper())
        elif isinstance(block, Table):
            self._add_table(doc, block)
        elif isinstance(block, Paragraph):
            self._add_paragraph(doc, block)
        else:
            raise TypeError(f"Unknown block element: {type(block).__name__}")

    def _add_heading(self, doc: Document, heading: Heading) -> None:
        para = doc.add_paragraph(style=f"Heading {heading.level}")
        if heading.level == 3:
            para.paragraph_format.left_indent = Inches(0.25)
        color = RGBColor.from_string((heading.accent or DEFAULT_HEADING_COLOR).upper())

        for run_data in heading.runs:
            run = para.add_run(run_data.text)
            self._apply_style(run, run_data)
            run.bold = True
            run.font.name = self.font_name
            run.font.size = HEADING_SIZES[heading.level]
            run.font.color.rgb = color
            if heading.level == 2:
                run.underline = True

    def _add_list_paragraph(self, doc: Document, marker: str):
        para = doc.add_paragraph()
        para.paragraph_format.left_indent = LIST_INDENT
        para.paragraph_format.space_after = Pt(0)
        para.add_run(marker)
        return para

    def _add_paragraph(self, doc: Document, paragraph: Paragraph) -> None:
        para = doc.add_paragraph()
        para.paragraph_format.space_after = Pt(0)
        if paragraph.placeholder:
            for run_data in paragraph.runs:
                run = para.add_run(run_data.text)
                self._apply_style(run, run_data)
                run.font.color.rgb = RGBColor.from_string(PLACEHOLDER_COLOR)
            return

        para.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        if paragraph.indented:
            para.paragraph_format.left_indent = LIST_INDENT
        self._add_runs(para, paragraph.runs)

    def _add_table(self, doc: Document, table: Table) -> None:
        """Add a full-width table; short rows leave trailing cells empty."""
        grid = doc.add_table(rows=len(table.rows), cols=table.column_count)
        self._set_table_width(grid)
        self._set_table_border(grid, TABLE_BORDER_COLOR)

        for row_index, row in enumerate(table.rows):
            for col_index, cell_data in enumerate(row.cells):
                cell = grid.rows[row_index].cells[col_index]
                self._add_runs(cell.paragraphs[0], cell_data.runs)
                if row_index == 0:
                    self._set_cell_shading(cell, TABLE_HEADER_FILL)

    def _add_runs(self, para, runs: list[TextRun]) -> None:
        for run_data in runs:
            run = para.add_run(run_data.text)
            self._apply_style(run, run_data)

    def _apply_style(self, run, run_data: TextRun) -> None:
        """Copy inline style flags onto a python-docx run."""
        run.bold = run_data.bold
        run.italic = run_data.italic
        if run_data.strike:
            run.font.strike = True
        if run_data.code:
            run.font.name = CODE_FONT
        if run_data.superscript:
            run.font.superscript = True
            run.font.size = SCRIPT_SIZE
        if run_data.subscript:
            run.font.subscript = True
            run.font.size = SCRIPT_SIZE

    def _set_paragraph_border(self, para, side: str) -> None:
        """Draw a single border on one side of a paragraph."""
        pPr = para._p.get_or_add_pPr()
        pBdr = OxmlElement("w:pBdr")
        border = OxmlElement(f"w:{side}")
        border.set(qn("w:val"), "single")
        border.set(qn("w:sz"), "6")
        border.set(qn("w:space"), "1")
        border.set(qn("w:color"), "auto")
        pBdr.append(border)
        pPr.append(pBdr)

    def _set_cell_shading(self, cell, color: str) -> None:
        """Set background color for a table cell."""
        shading_elm = OxmlElement("w:shd")
        shading_elm.set(qn("w:val"), "clear")
        shading_elm.set(qn("w:fill"), color.upper())
        cell._tc.get_or_add_tcPr().append(shading_elm)

    def _set_table_width(self, table) -> None:
        """Stretch a table to the full column width."""
        tblPr = table._tbl.tblPr
        tblW = tblPr.find(qn("w:tblW"))
        if tblW is None:
            tblW = OxmlElement("w:tblW")
            tblPr.append(tblW)
        tblW.set(qn("w:type"), "pct")
        tblW.set(qn("w:w"), "5000")

    def _set_table_border(self, table, color: str) -> None:
        """Set outer and inner borders for a table."""
        tbl = table._tbl
        tblPr = tbl.tblPr if tbl.tblPr is not None else OxmlElement("w:tblPr")
        tblBorders = OxmlElement("w:tblBorders")

        for border_name in ["top", "left", "bottom", "right", "insideH", "insideV"]:
            border = OxmlElement(f"w:{border_name}")
            border.set(qn("w:val"), "single")
            border.set(qn("w:sz"), "4")
            border.set(qn("w:space"), "0")
            border.set(qn("w:color"), color.upper())
            tblBorders.append(border)

        # tblBorders precedes tblLayout, tblCellMar and tblLook in CT_TblPr
        successor = next(
            (
                child
                for child in tblPr
                if child.tag in (qn("w:tblLayout"), qn("w:tblCellMar"), qn("w:tblLook"))
            ),
            None,
        )
        if successor is not None:
            successor.addprevious(tblBorders)
        else:
            tblPr.append(tblBorders)
        if tbl.tblPr is None:
            tbl.insert(0, tblPr)

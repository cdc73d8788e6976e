"""Pipe-delimited table reconstruction."""

import re
from typing import Optional

from sermon_export.formatting.inline import format_inline
from sermon_export.formatting.ir import Cell, Row, Table

# Lines made only of pipes, dashes, colons and whitespace (| --- | :-: |)
SEPARATOR_PATTERN = re.compile(r"^[|\s\-:]*$")


def is_table_line(line: str) -> bool:
    """Check if a line could belong to a pipe table."""
    return "|" in line


def is_separator(line: str) -> bool:
    return bool(SEPARATOR_PATTERN.match(line.strip()))


def split_cells(line: str) -> list[str]:
    """Split a table line into trimmed cell texts.

    The first and last fragments are dropped as leading/trailing pipe
    artifacts, so a line needs pipes on both ends to parse cleanly.
    """
    fragments = [cell.strip() for cell in line.split("|")]
    return fragments[1:-1]


def parse_table(lines: list[str]) -> Optional[Table]:
    """Rebuild a row/column grid from a group of pipe lines.

    Returns None (not a table) for fewer than 2 lines or when nothing
    is left after dropping separator rows. Rows are not padded.

    A line that yields no cells once the edge fragments are trimmed
    (`Faith | Works`, `| a`) is dropped along with its text, so such a
    line inside a table group does not reach the document.
    """
    if len(lines) < 2:
        return None

    rows: list[Row] = []
    for line in lines:
        if is_separator(line):
            continue
        cells = split_cells(line)
        if not cells:
            continue
        rows.append(Row(cells=[Cell(runs=format_inline(text)) for text in cells]))

    if not rows:
        return None

    return Table(rows=rows)

"""Inline markdown resolver: one line of text into styled runs."""

import re
from typing import NamedTuple

from sermon_export.formatting.ir import TextRun, TextStyle


class InlinePattern(NamedTuple):
    regex: re.Pattern
    style: TextStyle


class InlineMatch(NamedTuple):
    start: int
    end: int
    content: str
    style: TextStyle


# Order matters: on overlap the earlier pattern claims the whole span and
# any delimiter inside it stays literal text.
INLINE_PATTERNS: tuple[InlinePattern, ...] = (
    InlinePattern(re.compile(r"\*\*\*(.+?)\*\*\*"), TextStyle.BOLD | TextStyle.ITALIC),
    InlinePattern(re.compile(r"\*\*(.+?)\*\*"), TextStyle.BOLD),
    InlinePattern(re.compile(r"__(.+?)__"), TextStyle.BOLD),
    InlinePattern(re.compile(r"~~(.+?)~~"), TextStyle.STRIKE),
    InlinePattern(re.compile(r"`(.+?)`"), TextStyle.CODE),
    InlinePattern(re.compile(r"\^(.+?)\^"), TextStyle.SUPERSCRIPT),
    InlinePattern(re.compile(r"~(.+?)~"), TextStyle.SUBSCRIPT),
    InlinePattern(re.compile(r"\*(.+?)\*"), TextStyle.ITALIC),
    InlinePattern(re.compile(r"_(.+?)_"), TextStyle.ITALIC),
)


class InlineFormatter:
    """Resolve inline emphasis, code and sub/superscript markers."""

    def __init__(self, patterns: tuple[InlinePattern, ...] = INLINE_PATTERNS) -> None:
        self.patterns = patterns

    def format(self, line: str) -> list[TextRun]:
        """Split a line into styled runs.

        Never fails. Unclosed delimiters are left as literal characters.
        An empty line yields a single empty run.
        """
        if not line:
            return [TextRun(text="")]

        runs: list[TextRun] = []
        pos = 0

        for match in self.find_matches(line):
            if match.start > pos:
                runs.append(TextRun(text=line[pos : match.start]))
            runs.append(TextRun(text=match.content, style=match.style))
            pos = match.end

        if pos < len(line):
            runs.append(TextRun(text=line[pos:]))

        return runs

    def find_matches(self, line: str) -> list[InlineMatch]:
        """Select non-overlapping marker matches, ordered by offset.

        Candidates from every pattern are ranked by (priority, start) and
        accepted greedily when their span does not intersect an already
        accepted span.
        """
        candidates: list[tuple[int, InlineMatch]] = []
        for priority, pattern in enumerate(self.patterns):
            for m in pattern.regex.finditer(line):
                candidates.append(
                    (priority, InlineMatch(m.start(), m.end(), m.group(1), pattern.style))
                )

        candidates.sort(key=lambda item: (item[0], item[1].start))

        accepted: list[InlineMatch] = []
        for _, candidate in candidates:
            if not any(_overlaps(candidate, other) for other in accepted):
                accepted.append(candidate)

        return sorted(accepted, key=lambda m: m.start)


def _overlaps(a: InlineMatch, b: InlineMatch) -> bool:
    return a.start < b.end and a.end > b.start


_default_formatter = InlineFormatter()


def format_inline(line: str) -> list[TextRun]:
    """Format a single line with the default pattern table."""
    return _default_formatter.format(line)

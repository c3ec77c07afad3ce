"""Ordered line rules shared by the document parser and the live classifier.

Precedence, first match wins:

1. heading      ``#``-run, whitespace, text (level clamped to 6)
2. quote        ``>``-run, whitespace, text (depth = markers - 1)
3. quote marks  ``>``-run alone, empty content
4. divider      exactly ``---``, ``***`` or ``___``
5. image        ``![alt](url "title")`` on its own line
6. checklist    bullet, whitespace, ``[ ]``/``[x]``, whitespace, text
7. list         optional indent, bullet or ``N.``, whitespace, text

Checklist sits above list because every checklist line is also a valid list
line. Fences and tables need more than one line of context, so the parser and
the classifier handle them on their own; paragraph is the fallback of both.

Rules flagged ``trim`` see the whitespace-stripped line when run by the
parser. List rules always see leading indentation because it encodes depth.
"""

import re
from dataclasses import dataclass
from typing import Callable

from .model import Alignment, Classification

HEADING_RE = re.compile(r"(#+)[ \t]+(.*)")
QUOTE_RE = re.compile(r"(>+)[ \t]+(.*)")
QUOTE_MARKERS_RE = re.compile(r"(>+)[ \t]*")
MALFORMED_QUOTE_RE = re.compile(r">+\S")
IMAGE_RE = re.compile(r'!\[([^\]]*)\]\(([^)\s]+)(?:[ \t]+"([^"]*)")?\)')
CHECKLIST_RE = re.compile(r"([ \t]*)[-*+][ \t]+\[([ xX])\][ \t]+(.*)")
LIST_RE = re.compile(r"([ \t]*)([-*+]|\d+\.)[ \t]+(.*)")
FENCE_RE = re.compile(r"```(.*)")
ALIGNMENT_CELL_RE = re.compile(r":?-+:?")

DIVIDERS = ("---", "***", "___")
MAX_HEADING_LEVEL = 6
INDENT_WIDTH = 2


def indent_depth(indent: str) -> int:
    """Nesting depth for a run of leading whitespace; a tab is one level."""
    width = indent.count(" ") + indent.count("\t") * INDENT_WIDTH
    return width // INDENT_WIDTH


def _heading(text: str) -> Classification | None:
    m = HEADING_RE.fullmatch(text)
    if not m:
        return None
    level = min(len(m.group(1)), MAX_HEADING_LEVEL)
    return Classification("heading", m.group(2), {"level": level})


def _quote(text: str) -> Classification | None:
    m = QUOTE_RE.fullmatch(text)
    if not m:
        return None
    return Classification("quote", m.group(2), {"depth": len(m.group(1)) - 1})


def _quote_markers(text: str) -> Classification | None:
    m = QUOTE_MARKERS_RE.fullmatch(text)
    if not m:
        return None
    return Classification("quote", "", {"depth": len(m.group(1)) - 1})


def _divider(text: str) -> Classification | None:
    if text in DIVIDERS:
        return Classification("divider", "")
    return None


def _image(text: str) -> Classification | None:
    m = IMAGE_RE.fullmatch(text)
    if not m:
        return None
    alt, url, title = m.groups()
    meta = {"url": url, "alt": alt}
    if title:
        meta["title"] = title
    return Classification("image", alt, meta)


def _checklist(text: str) -> Classification | None:
    m = CHECKLIST_RE.fullmatch(text)
    if not m:
        return None
    indent, mark, content = m.groups()
    return Classification(
        "checklist",
        content,
        {"checked": mark.lower() == "x", "depth": indent_depth(indent)},
    )


def _list(text: str) -> Classification | None:
    m = LIST_RE.fullmatch(text)
    if not m:
        return None
    indent, marker, content = m.groups()
    return Classification(
        "list",
        content,
        {"ordered": marker[0].isdigit(), "depth": indent_depth(indent)},
    )


@dataclass(frozen=True)
class LineRule:
    name: str
    match: Callable[[str], Classification | None]
    trim: bool = True


LINE_RULES: tuple[LineRule, ...] = (
    LineRule("heading", _heading),
    LineRule("quote", _quote),
    LineRule("quote_markers", _quote_markers),
    LineRule("divider", _divider),
    LineRule("image", _image),
    LineRule("checklist", _checklist, trim=False),
    LineRule("list", _list, trim=False),
)

RULES_BY_NAME = {rule.name: rule for rule in LINE_RULES}


def match_line(line: str) -> Classification | None:
    """Classify one document line with the full cascade (parser view)."""
    stripped = line.strip()
    for rule in LINE_RULES:
        result = rule.match(stripped if rule.trim else line.rstrip("\r\n"))
        if result is not None:
            return result
    return None


def strip_marker(kind: str, line: str) -> str:
    """Remove a leading list, checklist or quote marker from a continuation line."""
    if kind == "checklist":
        m = CHECKLIST_RE.fullmatch(line)
        return m.group(3) if m else line
    if kind == "list":
        m = LIST_RE.fullmatch(line)
        return m.group(3) if m else line
    if kind == "quote":
        m = QUOTE_RE.fullmatch(line)
        if m:
            return m.group(2)
        return "" if QUOTE_MARKERS_RE.fullmatch(line) else line
    return line


# Tables


def split_table_row(line: str) -> list[str] | None:
    """Cells of a pipe-delimited row, trimmed; None unless the line starts with a pipe."""
    text = line.strip()
    if not text.startswith("|"):
        return None
    text = text[1:]
    if text.endswith("|"):
        text = text[:-1]
    return [cell.strip() for cell in text.split("|")]


def parse_alignments(line: str) -> list[Alignment] | None:
    """Column alignments of a separator row, or None if it is not one."""
    cells = split_table_row(line)
    if not cells or not all(ALIGNMENT_CELL_RE.fullmatch(c) for c in cells):
        return None
    out: list[Alignment] = []
    for cell in cells:
        if cell.startswith(":") and cell.endswith(":"):
            out.append("center")
        elif cell.endswith(":"):
            out.append("right")
        else:
            out.append("left")
    return out


def fit_row(cells: list[str], width: int) -> list[str]:
    """Pad or cut a row to exactly `width` cells."""
    return (cells + [""] * width)[:width]

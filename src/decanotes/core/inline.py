"""Inline formatting: split one line into flat styled segments."""

from .model import Segment

# Style a span takes on when wrapped in bold or italic markers
_UNDER_BOLD = {"normal": "bold", "italic": "bold-italic"}
_UNDER_ITALIC = {"normal": "italic", "bold": "bold-italic"}


def format_inline(text: str) -> list[Segment]:
    """
    Tokenize `text` into segments styled normal, bold, italic, bold-italic or
    code. Recognised markers: `` `code` ``, ``**bold**``/``__bold__`` and
    ``*italic*``/``_italic_``. An unmatched marker is kept as literal text.
    Adjacent segments of the same style are merged.

    Examples:
        >>> format_inline("a **b** `c`")
        [Segment(text='a ', style='normal'), Segment(text='b', style='bold'), Segment(text=' ', style='normal'), Segment(text='c', style='code')]
    """
    segments = _merge(_tokenize(text))
    return segments or [Segment(text, "normal")]


def _starts_italic(text: str, i: int) -> bool:
    ch = text[i]
    return ch in "*_" and text[i + 1 : i + 2] != ch


def _starts_marker(text: str, i: int) -> bool:
    return (
        text[i] == "`"
        or text.startswith("**", i)
        or text.startswith("__", i)
        or _starts_italic(text, i)
    )


def _tokenize(text: str) -> list[Segment]:
    out: list[Segment] = []
    i = 0
    n = len(text)
    while i < n:
        # code span
        if text[i] == "`":
            end = text.find("`", i + 1)
            if end != -1:
                out.append(Segment(text[i + 1 : end], "code"))
                i = end + 1
                continue

        # bold
        if text.startswith("**", i) or text.startswith("__", i):
            marker = text[i : i + 2]
            end = text.find(marker, i + 2)
            if end != -1:
                for seg in _tokenize(text[i + 2 : end]):
                    out.append(Segment(seg.text, _UNDER_BOLD.get(seg.style, seg.style)))
                i = end + 2
                continue

        # italic
        if _starts_italic(text, i):
            marker = text[i]
            end = text.find(marker, i + 1)
            if end != -1:
                for seg in _tokenize(text[i + 1 : end]):
                    out.append(Segment(seg.text, _UNDER_ITALIC.get(seg.style, seg.style)))
                i = end + 1
                continue

        # plain run up to the next marker; an unmatched marker is one literal char
        start = i
        i += 1
        while i < n and not _starts_marker(text, i):
            i += 1
        out.append(Segment(text[start:i], "normal"))
    return out


def _merge(segments: list[Segment]) -> list[Segment]:
    out: list[Segment] = []
    for seg in segments:
        if not seg.text:
            continue
        if out and out[-1].style == seg.style:
            out[-1] = Segment(out[-1].text + seg.text, seg.style)
        else:
            out.append(seg)
    return out


def plain_text(text: str) -> str:
    """Text with inline markers removed."""
    return "".join(seg.text for seg in format_inline(text))

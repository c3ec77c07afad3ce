"""Keep the caret on the same semantic content when a syntax prefix changes length."""

import re

from .model import Cursor

CHECKLIST_PREFIX_RE = re.compile(r"[ \t]*[-*+] \[([ xX])\] ")

PREFIX_PATTERNS: dict[str, re.Pattern[str]] = {
    "heading": re.compile(r"#+ "),
    "quote": re.compile(r">+ "),
    "code": re.compile(r"```[^\n]*"),
    "list": re.compile(r"[ \t]*(?:[-*+]|\d+\.) "),
}


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _shift(pos: int, old_len: int, new_len: int, text_len: int) -> int:
    # A position inside the old prefix may not leave the new prefix
    high = new_len if pos <= old_len else text_len
    return _clamp(pos + new_len - old_len, 0, high)


def translate_cursor(old_text: str, new_text: str, cursor: Cursor, block_type: str) -> Cursor:
    """
    Map `cursor` from `old_text` onto `new_text` for a block of `block_type`.

    A caret inside the old prefix stays inside the new prefix, shifted by the
    prefix length difference. A caret past the prefix shifts with the content.
    When either text lacks the prefix, both ends are clamped to the new text.
    Types without a prefix keep the cursor unchanged.
    """
    if block_type == "checklist":
        return _translate_checklist(old_text, new_text, cursor)

    pattern = PREFIX_PATTERNS.get(block_type)
    if pattern is None:
        return cursor

    old_match = pattern.match(old_text)
    new_match = pattern.match(new_text)
    if not old_match or not new_match:
        return _clamp_to(cursor, new_text)

    return _translate(cursor, old_match.end(), new_match.end(), new_text)


def _translate(cursor: Cursor, old_len: int, new_len: int, new_text: str) -> Cursor:
    return Cursor(
        _shift(cursor.start, old_len, new_len, len(new_text)),
        _shift(cursor.end, old_len, new_len, len(new_text)),
    )


def _clamp_to(cursor: Cursor, text: str) -> Cursor:
    return Cursor(min(cursor.start, len(text)), min(cursor.end, len(text)))


def _translate_checklist(old_text: str, new_text: str, cursor: Cursor) -> Cursor:
    old_match = CHECKLIST_PREFIX_RE.match(old_text)
    new_match = CHECKLIST_PREFIX_RE.match(new_text)
    if not old_match or not new_match:
        return _clamp_to(cursor, new_text)

    old_len = old_match.end()
    new_len = new_match.end()
    if cursor.start <= old_len and old_len == new_len:
        # The mark is one character wide: clearing it puts the caret right
        # after "[", setting it puts the caret right after the mark.
        mark = old_match.start(1)
        old_checked = old_match.group(1) != " "
        new_checked = new_match.group(1) != " "
        if old_checked and not new_checked and cursor.start == mark + 1:
            return Cursor.at(mark)
        if new_checked and not old_checked and cursor.start == mark:
            return Cursor.at(mark + 1)

    return _translate(cursor, old_len, new_len, new_text)

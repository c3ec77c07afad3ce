"""Re-derive a block's type, content and meta from its live-edited text."""

import re

from .model import Block, Classification
from .rules import FENCE_RE, MALFORMED_QUOTE_RE, RULES_BY_NAME, strip_marker

CLOSING_FENCE_RE = re.compile(r"\n?```\Z")

# Types that survive being emptied so the user can type past the bare marker
_STICKY_TYPES = ("quote", "list", "checklist")
# Edited through their own widgets, never re-derived from text
OPAQUE_TYPES = ("table", "video", "callout", "root")


def classify(text: str, current: Block, default_language: str = "plaintext") -> Classification:
    """
    Classify the raw text of the block being edited.

    Same precedence as the document parser, with editing-specific twists:
    an emptied quote, list or checklist keeps its type and meta; a fence only
    turns into a code block once a newline follows the fence line; leaving a
    quote or a code block without its marker falls back to paragraph.

    Args:
        text: Full text of the editable field, prefix included
        current: The block as it was before this edit
        default_language: Language for a fence without a tag

    Returns:
        Classification holding the new type, content and meta
    """
    if current.type in OPAQUE_TYPES:
        return Classification(current.type, text, current.meta.copy())

    # 1. emptied sticky block
    if not text.strip() and current.type in _STICKY_TYPES:
        return Classification(current.type, "", current.meta.copy())

    first, sep, rest = text.partition("\n")

    # 2. heading
    result = RULES_BY_NAME["heading"].match(text)
    if result:
        return result

    # 3. fence, committed once the fence line is closed by a newline
    fence = FENCE_RE.match(first)
    if fence:
        if not sep:
            return Classification("paragraph", text)
        language = fence.group(1).strip() or default_language
        content = CLOSING_FENCE_RE.sub("", rest, count=1)
        return Classification("code", content, {"language": language})
    if current.type == "code":
        return Classification("paragraph", text)

    # 4. image
    result = RULES_BY_NAME["image"].match(text)
    if result:
        return result

    # 5. quote
    result = RULES_BY_NAME["quote"].match(first)
    if result:
        return _with_continuation(result, rest, sep)
    if current.type == "quote":
        result = RULES_BY_NAME["quote_markers"].match(first)
        if result:
            return _with_continuation(result, rest, sep)
        if MALFORMED_QUOTE_RE.match(text) or not text.startswith(">"):
            return Classification("paragraph", text)

    # 6-7. checklist before list
    for name in ("checklist", "list"):
        result = RULES_BY_NAME[name].match(first)
        if result:
            return _with_continuation(result, rest, sep)

    # 8. divider
    result = RULES_BY_NAME["divider"].match(text)
    if result:
        return result

    return Classification("paragraph", text)


def _with_continuation(head: Classification, rest: str, sep: str) -> Classification:
    """Append continuation lines to a multi-line block, minus their markers."""
    if not sep:
        return head
    lines = [head.content] + [strip_marker(head.type, line) for line in rest.split("\n")]
    return Classification(head.type, "\n".join(lines), head.meta)

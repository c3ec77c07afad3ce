"""Utility functions for decanotes."""

import re
import secrets

from .inline import plain_text
from .model import Block

PREVIEW_LENGTH = 120
UNTITLED = "Untitled"


def new_block_id() -> str:
    """Fresh opaque id for a block."""
    return f"block-{secrets.token_hex(6)}"


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def derive_title(blocks: list[Block]) -> str:
    """
    Title for a note without one.

    - First heading's text, if any
    - Otherwise the first non-empty line of any block
    - Otherwise "Untitled"
    """
    for block in blocks:
        if block.type == "heading" and block.content.strip():
            return plain_text(block.content.strip())
    for block in blocks:
        for line in block.content.split("\n"):
            if line.strip():
                return plain_text(line.strip())
    return UNTITLED


def make_preview(blocks: list[Block], length: int = PREVIEW_LENGTH) -> str:
    """
    One-line preview for note lists: block contents with inline markers
    removed, whitespace collapsed, cut at `length` characters.

    Examples:
        >>> make_preview([Block("b1", "paragraph", "Some **bold**\\ntext")])
        'Some bold text'
    """
    parts = [plain_text(b.content) for b in blocks if b.content.strip()]
    text = re.sub(r"\s+", " ", " ".join(parts)).strip()
    if len(text) > length:
        return text[: length - 1].rstrip() + "…"
    return text

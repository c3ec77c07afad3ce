"""Editing operations over a note's block sequence.

Every function takes a list of blocks and returns a new list; the input is
never mutated. Unknown ids leave the sequence unchanged.
"""

from typing import Any, Mapping, Sequence

from .classifier import classify
from .meta import BlockMeta
from .model import Block, BlockId, BlockType
from .ports import IdGenerator
from .utils import new_block_id

# Initial meta for freshly inserted blocks
_DEFAULT_META: dict[str, dict[str, Any]] = {
    "heading": {"level": 1},
    "list": {"ordered": False, "depth": 0},
    "checklist": {"checked": False, "depth": 0},
    "quote": {"depth": 0},
}


def new_block(
    type: BlockType,
    content: str = "",
    meta: Mapping[str, Any] | None = None,
    idgen: IdGenerator | None = None,
) -> Block:
    block_id = idgen.new_id() if idgen else new_block_id()
    initial = dict(_DEFAULT_META.get(type, {}))
    initial.update(meta or {})
    return Block(block_id, type, content, BlockMeta(initial))


def find_block(blocks: Sequence[Block], id: BlockId) -> int:
    """Index of the block with `id`, or -1."""
    for i, block in enumerate(blocks):
        if block.id == id:
            return i
    return -1


def insert_block(
    blocks: Sequence[Block],
    type: BlockType,
    index: int | None = None,
    idgen: IdGenerator | None = None,
) -> tuple[list[Block], Block]:
    """Insert an empty block of `type`; `index` is clamped, None appends."""
    block = new_block(type, idgen=idgen)
    out = list(blocks)
    pos = len(out) if index is None else min(max(index, 0), len(out))
    out.insert(pos, block)
    return out, block


def delete_block(blocks: Sequence[Block], id: BlockId) -> list[Block]:
    """
    Remove a block. A document always keeps at least one block, so deleting
    the last one leaves a single empty paragraph.
    """
    out = [b for b in blocks if b.id != id]
    if len(out) == len(blocks):
        return list(blocks)
    return out or [new_block("paragraph")]


def move_block(blocks: Sequence[Block], id: BlockId, new_index: int) -> tuple[list[Block], bool]:
    i = find_block(blocks, id)
    if i < 0 or not 0 <= new_index < len(blocks) or new_index == i:
        return list(blocks), False
    out = list(blocks)
    block = out.pop(i)
    out.insert(new_index, block)
    return out, True


def move_block_up(blocks: Sequence[Block], id: BlockId) -> tuple[list[Block], bool]:
    return move_block(blocks, id, find_block(blocks, id) - 1)


def move_block_down(blocks: Sequence[Block], id: BlockId) -> tuple[list[Block], bool]:
    i = find_block(blocks, id)
    if i < 0:
        return list(blocks), False
    return move_block(blocks, id, i + 1)


def duplicate_block(
    blocks: Sequence[Block], id: BlockId, idgen: IdGenerator | None = None
) -> tuple[list[Block], Block | None]:
    """Copy a block (new id, copied meta) right after the original."""
    i = find_block(blocks, id)
    if i < 0:
        return list(blocks), None
    src = blocks[i]
    copy = Block(idgen.new_id() if idgen else new_block_id(), src.type, src.content, src.meta.copy())
    out = list(blocks)
    out.insert(i + 1, copy)
    return out, copy


def split_block(
    blocks: Sequence[Block], id: BlockId, idgen: IdGenerator | None = None
) -> tuple[list[Block], Block | None]:
    """Enter at the end of a block: a non-blank block gets an empty paragraph after it."""
    i = find_block(blocks, id)
    if i < 0 or not blocks[i].content.strip():
        return list(blocks), None
    return insert_block(blocks, "paragraph", i + 1, idgen=idgen)


def backspace_block(blocks: Sequence[Block], id: BlockId) -> tuple[list[Block], BlockId | None]:
    """
    Backspace at the start of a block.

    - A quote holding at most one character turns back into a paragraph
      and keeps focus
    - Any other empty block is removed, unless it is the only one, and
      focus moves to the previous block

    Returns the new blocks and the id to focus, or None when nothing changed.
    """
    i = find_block(blocks, id)
    if i < 0:
        return list(blocks), None
    block = blocks[i]
    out = list(blocks)
    if block.type == "quote" and len(block.content.strip()) <= 1:
        out[i] = Block(block.id, "paragraph", block.content.strip())
        return out, block.id
    if not block.content.strip() and len(blocks) > 1:
        del out[i]
        return out, out[max(i - 1, 0)].id
    return out, None


def apply_raw_text(
    blocks: Sequence[Block], id: BlockId, text: str, default_language: str = "plaintext"
) -> list[Block]:
    """Re-derive a block from its edited text, keeping its id."""
    i = find_block(blocks, id)
    if i < 0:
        return list(blocks)
    result = classify(text, blocks[i], default_language)
    out = list(blocks)
    out[i] = Block(id, result.type, result.content, result.meta)
    return out


def blocks_to_plain_text(blocks: Sequence[Block]) -> str:
    return "\n\n".join(b.content for b in blocks if b.content)

"""Blocks and notes as JSON-compatible dicts."""

import json
from datetime import datetime, timezone
from typing import Any, Sequence

from ..core.model import BLOCK_TYPES, Block, Note
from ..core.utils import new_block_id
from ..errors import CodecError


def block_to_dict(block: Block) -> dict[str, Any]:
    out: dict[str, Any] = {"id": block.id, "type": block.type, "content": block.content}
    if block.meta:
        out["meta"] = dict(block.meta)
    return out


def block_from_dict(data: Any) -> Block:
    """
    Build a Block from a decoded JSON object. A missing id gets a fresh one;
    an unknown type or non-string content is a CodecError.
    """
    if not isinstance(data, dict):
        raise CodecError(f"Block must be an object, got {type(data).__name__}")
    type_ = data.get("type", "paragraph")
    if type_ not in BLOCK_TYPES:
        raise CodecError(f"Unknown block type {type_!r}")
    content = data.get("content", "")
    if not isinstance(content, str):
        raise CodecError("Block content must be a string")
    meta = data.get("meta") or {}
    if not isinstance(meta, dict):
        raise CodecError("Block meta must be an object")
    return Block(str(data.get("id") or new_block_id()), type_, content, meta)


def dumps_blocks(blocks: Sequence[Block], indent: int | None = 2) -> str:
    return json.dumps([block_to_dict(b) for b in blocks], indent=indent, ensure_ascii=False)


def loads_blocks(text: str) -> list[Block]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise CodecError("Expected a JSON array of blocks")
    return [block_from_dict(item) for item in data]


def note_to_dict(note: Note) -> dict[str, Any]:
    return {
        "id": note.id,
        "title": note.title,
        "content": [block_to_dict(b) for b in note.content],
        "preview": note.preview,
        "color": note.color,
        "createdAt": note.created_at.isoformat(),
        "updatedAt": note.updated_at.isoformat(),
        "lastModified": note.last_modified.isoformat(),
    }


def parse_timestamp(value: Any) -> datetime:
    """Accept datetime objects (as YAML loads them) or ISO-8601 strings; naive means UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise CodecError(f"Invalid timestamp {value!r}") from e
    if not isinstance(value, datetime):
        raise CodecError(f"Invalid timestamp {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value

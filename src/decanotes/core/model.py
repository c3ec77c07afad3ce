from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Mapping

from .meta import BlockMeta

BlockId = str
NoteId = str

BlockType = Literal[
    "paragraph",
    "heading",
    "code",
    "quote",
    "list",
    "checklist",
    "divider",
    "image",
    "table",
    # extended set, passed through untouched by the conversion engine
    "video",
    "callout",
    "root",
]

BLOCK_TYPES: tuple[str, ...] = (
    "paragraph",
    "heading",
    "code",
    "quote",
    "list",
    "checklist",
    "divider",
    "image",
    "table",
    "video",
    "callout",
    "root",
)

SegmentStyle = Literal["normal", "bold", "italic", "bold-italic", "code"]
Alignment = Literal["left", "center", "right"]
EditorMode = Literal["edit", "raw"]
NoteColor = Literal["default", "cream", "sage", "sky", "lavender", "peach"]

NOTE_COLORS: tuple[str, ...] = ("default", "cream", "sage", "sky", "lavender", "peach")


def _as_meta(meta: Mapping[str, Any] | None) -> BlockMeta:
    if isinstance(meta, BlockMeta):
        return meta
    return BlockMeta(dict(meta or {}))


@dataclass(frozen=True)
class Block:
    id: BlockId
    type: BlockType
    content: str = ""  # semantic text, never includes the markdown prefix
    meta: BlockMeta = field(default_factory=BlockMeta)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", _as_meta(self.meta))


@dataclass(frozen=True)
class Classification:
    """Outcome of re-deriving a block from its raw text."""
    type: BlockType
    content: str
    meta: BlockMeta = field(default_factory=BlockMeta)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", _as_meta(self.meta))


@dataclass(frozen=True)
class Cursor:
    start: int  # character offsets into the displayed text
    end: int

    @classmethod
    def at(cls, pos: int) -> Cursor:
        return cls(pos, pos)


@dataclass(frozen=True)
class Segment:
    text: str
    style: SegmentStyle = "normal"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Note:
    id: NoteId
    title: str = ""
    content: list[Block] = field(default_factory=list)
    preview: str = ""
    color: NoteColor = "default"
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    last_modified: datetime = field(default_factory=_now)

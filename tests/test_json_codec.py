"""Tests for the JSON block codec."""

from datetime import datetime, timezone

import pytest

from decanotes.adapters.json_codec import (
    block_from_dict,
    block_to_dict,
    dumps_blocks,
    loads_blocks,
    note_to_dict,
    parse_timestamp,
)
from decanotes.core.model import Block, Note
from decanotes.errors import CodecError


def test_block_to_dict_omits_empty_meta():
    """Test meta is only written when present."""
    assert block_to_dict(Block("b1", "divider")) == {"id": "b1", "type": "divider", "content": ""}
    assert block_to_dict(Block("b1", "heading", "T", {"level": 2}))["meta"] == {"level": 2}


def test_loads_blocks():
    """Test decoding a JSON array of blocks."""
    blocks = loads_blocks('[{"id": "x", "type": "heading", "content": "T", "meta": {"level": 2}}, {"type": "paragraph"}]')

    assert blocks[0].id == "x"
    assert blocks[0].meta["level"] == 2
    assert blocks[1].id.startswith("block-")
    assert blocks[1].content == ""


def test_dumps_then_loads():
    """Test blocks survive a JSON round trip."""
    blocks = [
        Block("t", "table", "", {"headers": ["A"], "rows": [["1"]], "alignments": ["left"]}),
        Block("c", "checklist", "todo", {"checked": False, "depth": 0}),
    ]
    assert loads_blocks(dumps_blocks(blocks)) == blocks


def test_invalid_payloads():
    """Test malformed input raises CodecError."""
    with pytest.raises(CodecError):
        loads_blocks("{not json")
    with pytest.raises(CodecError):
        loads_blocks('{"type": "paragraph"}')
    with pytest.raises(CodecError):
        block_from_dict({"type": "marquee"})
    with pytest.raises(CodecError):
        block_from_dict({"type": "paragraph", "content": 3})
    with pytest.raises(CodecError):
        block_from_dict({"type": "paragraph", "meta": []})
    with pytest.raises(CodecError):
        block_from_dict("paragraph")


def test_note_to_dict():
    """Test note fields and camelCase timestamps."""
    ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    note = Note(id="n1", title="T", content=[Block("b1", "paragraph", "x")],
                created_at=ts, updated_at=ts, last_modified=ts)
    data = note_to_dict(note)

    assert data["id"] == "n1"
    assert data["color"] == "default"
    assert data["createdAt"] == "2024-01-02T03:04:05+00:00"
    assert data["content"] == [{"id": "b1", "type": "paragraph", "content": "x"}]


def test_parse_timestamp():
    """Test ISO strings and naive datetimes come back in UTC."""
    assert parse_timestamp("2024-01-02T03:04:05+00:00").tzinfo is not None
    naive = parse_timestamp(datetime(2024, 1, 2))
    assert naive.tzinfo == timezone.utc
    with pytest.raises(CodecError):
        parse_timestamp("yesterday")
    with pytest.raises(CodecError):
        parse_timestamp(42)

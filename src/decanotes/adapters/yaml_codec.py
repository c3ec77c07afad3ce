import io
import re
from typing import Any

import yaml

from ..core.model import NOTE_COLORS, Note
from ..core.ports import NoteCodec, ParserStrategy, SerializerStrategy
from ..core.utils import make_preview, normalize_newlines
from ..errors import CodecError
from .json_codec import parse_timestamp

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter:
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        m = _FM.match(text)
        if not m:
            return {}, text
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError as e:
            raise CodecError(f"Invalid front matter: {e}") from e
        if not isinstance(fm, dict):
            raise CodecError("Front matter must be a mapping")
        body = text[m.end() :]
        return (fm, body)

    def encode(self, meta: dict[str, Any]) -> str:
        if not meta:
            return ""
        buf = io.StringIO()
        yaml.safe_dump(meta, buf, sort_keys=False, allow_unicode=True)
        return f"---\n{buf.getvalue()}---\n"


class MarkdownNoteCodec(NoteCodec):
    """
    A note on disk is YAML front matter followed by the markdown rendering of
    its blocks. The blank line after the front matter is not part of the body.
    """

    def __init__(self, fm: YamlFrontmatter, parser: ParserStrategy, serializer: SerializerStrategy):
        self.fm = fm
        self.parser = parser
        self.serializer = serializer

    def decode_file(self, text: str, id: str) -> Note:
        meta, body = self.fm.decode(normalize_newlines(text))
        blocks = self.parser.parse(body.lstrip("\n"))
        note = Note(
            id=id,  # filename is the source of truth
            title=str(meta.get("title") or ""),
            content=blocks,
            preview=make_preview(blocks),
            color=meta.get("color") if meta.get("color") in NOTE_COLORS else "default",
        )
        for key in ("created_at", "updated_at", "last_modified"):
            if meta.get(key) is not None:
                setattr(note, key, parse_timestamp(meta[key]))
        return note

    def encode_file(self, note: Note) -> str:
        meta = {
            "id": note.id,
            "title": note.title,
            "color": note.color,
            "created_at": note.created_at.isoformat(),
            "updated_at": note.updated_at.isoformat(),
            "last_modified": note.last_modified.isoformat(),
        }
        body = self.serializer.serialize(note.content)
        return self.fm.encode(meta) + "\n" + body + "\n"

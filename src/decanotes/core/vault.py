import logging
from datetime import datetime, timezone

from ..errors import CodecError, NoteNotFoundError
from .model import Note, NoteId
from .ports import NoteCodec, NoteStore, StorageStrategy
from .utils import derive_title, make_preview

logger = logging.getLogger(__name__)


class Vault(NoteStore):
    """Local note store: one markdown file per note, blocks parsed on load."""

    def __init__(self, storage: StorageStrategy, codec: NoteCodec):
        self.storage = storage
        self.codec = codec

    def get_note(self, id: NoteId) -> Note | None:
        raw = self.storage.read_raw(id)
        if raw is None:
            return None
        return self.codec.decode_file(raw, id)

    def require(self, id: NoteId) -> Note:
        note = self.get_note(id)
        if note is None:
            raise NoteNotFoundError(id)
        return note

    def get_notes(self) -> list[Note]:
        """All readable notes, most recently updated first."""
        notes = []
        for id in self.storage.list_all_ids():
            try:
                note = self.get_note(id)
            except CodecError as e:
                logger.warning("skipping note %s: %s", id, e)
                continue
            if note is not None:
                notes.append(note)
        notes.sort(key=lambda n: n.updated_at, reverse=True)
        return notes

    def save_note(self, note: Note) -> Note:
        now = datetime.now(timezone.utc)
        note.updated_at = now
        note.last_modified = now
        note.preview = make_preview(note.content)
        if not note.title.strip():
            note.title = derive_title(note.content)
        self.storage.write_raw(note.id, self.codec.encode_file(note))
        logger.debug("saved note %s (%d blocks)", note.id, len(note.content))
        return note

    def delete_note(self, id: NoteId) -> bool:
        return self.storage.delete_raw(id)

    def sync(self) -> None:
        # Files on disk are the source of truth; nothing to reconcile
        return None

    def list_ids(self) -> list[NoteId]:
        return list(self.storage.list_all_ids())

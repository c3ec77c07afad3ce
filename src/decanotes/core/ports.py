from typing import Iterable, Protocol, Sequence

from .model import Block, Note, NoteId


class ParserStrategy(Protocol):
    """
    Turn a whole markdown document into blocks. Total: never raises and never
    returns an empty list.
    """

    def parse(self, markdown: str) -> list[Block]:
        pass


class SerializerStrategy(Protocol):
    """
    Render blocks back to markdown. Total: missing metadata falls back to
    defaults.
    """

    def serialize(self, blocks: Sequence[Block]) -> str:
        pass


class StorageStrategy(Protocol):
    """
    Flat store: one directory, files named <id>.md
    """

    def read_raw(self, id: NoteId) -> str | None:
        pass

    def write_raw(self, id: NoteId, contents: str) -> None:
        pass

    def delete_raw(self, id: NoteId) -> bool:
        pass

    def list_all_ids(self) -> Iterable[NoteId]:
        pass


class NoteCodec(Protocol):
    """
    Compose note metadata (front matter) with the markdown body.
    """

    def decode_file(self, text: str, id: NoteId) -> Note:
        pass

    def encode_file(self, note: Note) -> str:
        pass


class IdGenerator(Protocol):
    def new_id(self) -> str:
        pass


class NoteStore(Protocol):
    """
    Storage backend seen by the application. Local, IPFS or renterd backends
    all expose this surface; only the local one lives in this package.
    """

    def get_notes(self) -> list[Note]:
        pass

    def get_note(self, id: NoteId) -> Note | None:
        pass

    def save_note(self, note: Note) -> Note:
        pass

    def delete_note(self, id: NoteId) -> bool:
        pass

    def sync(self) -> None:
        pass

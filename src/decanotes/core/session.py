import logging
from typing import Callable

from . import document
from .cursor import translate_cursor
from .display import display_value
from .inline import format_inline
from .model import Block, BlockId, Cursor, EditorMode, Segment
from .ports import IdGenerator, ParserStrategy, SerializerStrategy

logger = logging.getLogger(__name__)

Listener = Callable[[list[Block]], None]


class EditorSession:
    """
    State behind one open note: its blocks, the edit/raw mode, the raw
    markdown buffer and the focused block.

    All block edits go through the pure functions in `document`; the
    session swaps in the returned list and notifies subscribers with it.
    """

    def __init__(
        self,
        parser: ParserStrategy,
        serializer: SerializerStrategy,
        markdown: str = "",
        mode: EditorMode = "edit",
        default_language: str = "plaintext",
        idgen: IdGenerator | None = None,
    ):
        self.parser = parser
        self.serializer = serializer
        self.default_language = default_language
        self.idgen = idgen
        self.blocks: list[Block] = parser.parse(markdown)
        self.mode: EditorMode = "edit"
        self.raw = ""
        self.active_id: BlockId | None = None
        self._listeners: list[Listener] = []
        if mode == "raw":
            self.toggle_mode()

    # Subscribers

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Call `callback` with the block list after every change; returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _commit(self, blocks: list[Block]) -> None:
        self.blocks = blocks
        for callback in list(self._listeners):
            callback(list(blocks))

    # Lookup

    def block(self, id: BlockId) -> Block | None:
        i = document.find_block(self.blocks, id)
        return self.blocks[i] if i >= 0 else None

    def display_value(self, id: BlockId) -> str:
        block = self.block(id)
        if block is None:
            return ""
        return display_value(block, is_active=id == self.active_id)

    def segments(self, id: BlockId) -> list[Segment]:
        block = self.block(id)
        return format_inline(block.content if block else "")

    def focus(self, id: BlockId | None) -> None:
        if id is not None and self.block(id) is None:
            return
        self.active_id = id

    # Block operations

    def insert_block(self, type: str, index: int | None = None) -> Block:
        blocks, block = document.insert_block(self.blocks, type, index, idgen=self.idgen)
        self._commit(blocks)
        self.active_id = block.id
        return block

    def delete_block(self, id: BlockId) -> None:
        blocks = document.delete_block(self.blocks, id)
        if blocks == self.blocks:
            return
        if self.active_id == id:
            self.active_id = None
        self._commit(blocks)

    def move_block_up(self, id: BlockId) -> bool:
        blocks, moved = document.move_block_up(self.blocks, id)
        if moved:
            self._commit(blocks)
        return moved

    def move_block_down(self, id: BlockId) -> bool:
        blocks, moved = document.move_block_down(self.blocks, id)
        if moved:
            self._commit(blocks)
        return moved

    def duplicate_block(self, id: BlockId) -> Block | None:
        blocks, copy = document.duplicate_block(self.blocks, id, idgen=self.idgen)
        if copy is not None:
            self._commit(blocks)
        return copy

    def edit_block(self, id: BlockId, text: str, cursor: Cursor) -> Cursor:
        """
        Apply the text typed into a block's field.

        The block is re-classified from `text`, and the cursor is mapped onto
        the display value rebuilt from the result so it stays on the same
        content when the syntax prefix changes length.
        """
        if self.block(id) is None:
            return cursor
        blocks = document.apply_raw_text(self.blocks, id, text, self.default_language)
        self._commit(blocks)
        updated = self.blocks[document.find_block(blocks, id)]
        shown = display_value(updated, is_active=True)
        return translate_cursor(text, shown, cursor, updated.type)

    def press_enter(self, id: BlockId) -> Block | None:
        blocks, created = document.split_block(self.blocks, id, idgen=self.idgen)
        if created is not None:
            self._commit(blocks)
            self.active_id = created.id
        return created

    def press_backspace(self, id: BlockId) -> BlockId | None:
        blocks, focus_id = document.backspace_block(self.blocks, id)
        if focus_id is not None:
            self._commit(blocks)
            self.active_id = focus_id
        return focus_id

    # Modes

    def get_current_mode(self) -> EditorMode:
        return self.mode

    def toggle_mode(self) -> EditorMode:
        if self.mode == "edit":
            self.raw = self.serializer.serialize(self.blocks)
            self.mode = "raw"
        else:
            self.active_id = None
            self.mode = "edit"
            self._commit(self.parser.parse(self.raw))
        logger.debug("editor mode -> %s (%d blocks)", self.mode, len(self.blocks))
        return self.mode

    def get_markdown(self) -> str:
        if self.mode == "raw":
            return self.raw
        return self.serializer.serialize(self.blocks)

    def set_markdown(self, text: str) -> None:
        """Replace the document; in raw mode only the buffer changes until the next toggle."""
        if self.mode == "raw":
            self.raw = text
            return
        self.active_id = None
        self._commit(self.parser.parse(text))

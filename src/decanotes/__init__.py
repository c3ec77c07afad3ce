"""decanotes: block-based markdown notes."""

__version__ = "0.1.0"

from .adapters.markdown_parser import MarkdownParser, parse_markdown
from .adapters.markdown_serializer import MarkdownSerializer, serialize_blocks
from .core.classifier import classify
from .core.cursor import translate_cursor
from .core.display import display_value
from .core.inline import format_inline
from .core.model import Block, Classification, Cursor, Note, Segment
from .core.session import EditorSession

__all__ = [
    "__version__",
    "Block",
    "Classification",
    "Cursor",
    "EditorSession",
    "MarkdownParser",
    "MarkdownSerializer",
    "Note",
    "Segment",
    "classify",
    "display_value",
    "format_inline",
    "parse_markdown",
    "serialize_blocks",
    "translate_cursor",
]

from dataclasses import dataclass, field
from typing import Any

from ..core.model import Block
from ..core.ports import IdGenerator, ParserStrategy
from ..core.rules import fit_row, match_line, parse_alignments, split_table_row
from ..core.utils import new_block_id, normalize_newlines

# A new item joins the open block only while these meta values agree
_RUN_KEYS = {
    "list": ("ordered", "depth"),
    "checklist": ("checked", "depth"),
}


@dataclass
class _OpenBlock:
    type: str
    lines: list[str]
    meta: dict[str, Any] = field(default_factory=dict)

    def accepts(self, type_: str, meta: dict[str, Any]) -> bool:
        if type_ != self.type:
            return False
        keys = _RUN_KEYS.get(type_, ())
        return all(self.meta.get(k) == meta.get(k) for k in keys)


class MarkdownParser(ParserStrategy):
    def __init__(self, idgen: IdGenerator | None = None, default_language: str = "plaintext"):
        self.idgen = idgen
        self.default_language = default_language

    def _new_id(self) -> str:
        return self.idgen.new_id() if self.idgen else new_block_id()

    def _block(self, type_: str, content: str = "", meta: dict | None = None) -> Block:
        return Block(self._new_id(), type_, content, meta or {})

    def parse(self, markdown: str) -> list[Block]:
        text = normalize_newlines(markdown)
        if not text.strip():
            return [self._block("paragraph")]

        lines = text.split("\n")
        blocks: list[Block] = []
        current: _OpenBlock | None = None
        in_fence = False

        def flush() -> None:
            nonlocal current
            if current is not None:
                blocks.append(self._block(current.type, "\n".join(current.lines), current.meta))
                current = None

        i = 0
        while i < len(lines):
            line = lines[i]
            stripped = line.strip()
            i += 1

            # Fenced code: everything up to the closing fence is verbatim
            if in_fence:
                if stripped.startswith("```"):
                    flush()
                    in_fence = False
                else:
                    current.lines.append(line)
                continue
            if stripped.startswith("```"):
                flush()
                language = stripped[3:].strip() or self.default_language
                current = _OpenBlock("code", [], {"language": language})
                in_fence = True
                continue

            # Blank line separates blocks
            if not stripped:
                flush()
                continue

            # Table: header row, alignment row, data rows
            table = self._match_table(lines, i - 1)
            if table is not None:
                flush()
                block, i = table
                blocks.append(block)
                continue

            result = match_line(line)

            # Paragraph text, newline-joined
            if result is None:
                if current is None or current.type != "paragraph":
                    flush()
                    current = _OpenBlock("paragraph", [])
                current.lines.append(line)
                continue

            # List and checklist items aggregate into runs
            if result.type in _RUN_KEYS:
                meta = dict(result.meta)
                if current is not None and current.accepts(result.type, meta):
                    current.lines.append(result.content)
                else:
                    flush()
                    current = _OpenBlock(result.type, [result.content], meta)
                continue

            # Heading, quote, divider and image close immediately
            flush()
            blocks.append(self._block(result.type, result.content, dict(result.meta)))

        # Unterminated fence keeps what it collected
        flush()
        return blocks or [self._block("paragraph")]

    def _match_table(self, lines: list[str], start: int) -> tuple[Block, int] | None:
        """Table starting at `start`, with the index of the first line after it."""
        headers = split_table_row(lines[start])
        if headers is None or start + 1 >= len(lines):
            return None
        alignments = parse_alignments(lines[start + 1])
        if alignments is None or len(alignments) != len(headers):
            return None

        rows = []
        end = start + 2
        while end < len(lines):
            cells = split_table_row(lines[end])
            if cells is None:
                break
            rows.append(fit_row(cells, len(headers)))
            end += 1

        meta = {"headers": headers, "rows": rows, "alignments": alignments}
        return self._block("table", "", meta), end


def parse_markdown(markdown: str) -> list[Block]:
    """Parse a markdown document into blocks with fresh ids."""
    return MarkdownParser().parse(markdown)

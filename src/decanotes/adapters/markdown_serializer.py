from typing import Sequence

from ..core.meta import BlockMeta
from ..core.model import Block
from ..core.ports import SerializerStrategy

_ALIGNMENT_MARKERS = {"center": ":---:", "right": "---:", "left": "---"}


def _indent(meta: BlockMeta) -> str:
    return "  " * max(meta.get_int("depth"), 0)


def _heading(block: Block) -> str:
    level = min(max(block.meta.get_int("level", 1), 1), 6)
    return f"{'#' * level} {block.content}"


def _code(block: Block) -> str:
    return f"```{block.meta.get_str('language')}\n{block.content}\n```"


def _quote(block: Block) -> str:
    prefix = ">" * (max(block.meta.get_int("depth"), 0) + 1)
    if not block.content.strip():
        return f"{prefix} "
    return "\n".join(f"{prefix} {line}" for line in block.content.split("\n"))


def _list(block: Block, start: int = 1) -> str:
    indent = _indent(block.meta)
    items = block.content.split("\n")
    if block.meta.get_bool("ordered"):
        return "\n".join(f"{indent}{n}. {item}" for n, item in enumerate(items, start=start))
    return "\n".join(f"{indent}- {item}" for item in items)


def _checklist(block: Block) -> str:
    indent = _indent(block.meta)
    mark = "x" if block.meta.get_bool("checked") else " "
    return "\n".join(f"{indent}- [{mark}] {item}" for item in block.content.split("\n"))


def _divider(block: Block) -> str:
    return "---"


def _image(block: Block) -> str:
    title = block.meta.get_str("title")
    suffix = f' "{title}"' if title else ""
    return f"![{block.content}]({block.meta.get_str('url')}{suffix})"


def _table(block: Block) -> str:
    headers = [str(h) for h in block.meta.get_list("headers")]
    if not headers:
        return ""
    alignments = block.meta.get_list("alignments")
    markers = [
        _ALIGNMENT_MARKERS.get(alignments[n] if n < len(alignments) else "left", "---")
        for n in range(len(headers))
    ]
    lines = [_row(headers), _row(markers)]
    for row in block.meta.get_list("rows"):
        cells = list(row) if isinstance(row, (list, tuple)) else []
        lines.append(_row([str(cells[n]) if n < len(cells) else "" for n in range(len(headers))]))
    return "\n".join(lines)


def _row(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"


_RENDERERS = {
    "heading": _heading,
    "code": _code,
    "quote": _quote,
    "list": _list,
    "checklist": _checklist,
    "divider": _divider,
    "image": _image,
    "table": _table,
}


def render_block(block: Block) -> str:
    """Markdown for a single block; unknown types render their content verbatim."""
    renderer = _RENDERERS.get(block.type)
    return renderer(block) if renderer else block.content


def joiner(block: Block, nxt: Block) -> str:
    """
    Separator between two adjacent blocks. Runs that the parser would merge
    back together are joined by a single newline:
    - quotes of equal depth
    - lists with equal ordered flag and depth
    - checklists
    Everything else is separated by a blank line.
    """
    if block.type != nxt.type:
        return "\n\n"
    a, b = block.meta, nxt.meta
    if block.type == "quote" and a.get_int("depth") == b.get_int("depth"):
        return "\n"
    if (
        block.type == "list"
        and a.get_bool("ordered") == b.get_bool("ordered")
        and a.get_int("depth") == b.get_int("depth")
    ):
        return "\n"
    if block.type == "checklist":
        return "\n"
    return "\n\n"


class MarkdownSerializer(SerializerStrategy):
    def serialize(self, blocks: Sequence[Block]) -> str:
        out: list[str] = []
        number = 1
        for i, block in enumerate(blocks):
            sep = joiner(blocks[i - 1], block) if i else ""
            out.append(sep)
            if block.type != "list":
                out.append(render_block(block))
                continue
            # Lists glued into one run keep counting where the previous one stopped
            start = number if sep == "\n" else 1
            out.append(_list(block, start))
            number = start + len(block.content.split("\n"))
        return "".join(out)


def serialize_blocks(blocks: Sequence[Block]) -> str:
    """Render blocks as one markdown document."""
    return MarkdownSerializer().serialize(blocks)

"""Text shown in a block's editable field."""

from .model import Block


def _indent(depth: int) -> str:
    return "  " * max(depth, 0)


def display_value(block: Block, is_active: bool) -> str:
    """
    Inactive blocks show their plain content. The active block shows its
    markdown prefix rebuilt from meta so the syntax can be edited inline;
    feeding the result to `classify` yields the same block back.
    """
    if not is_active:
        return block.content

    meta = block.meta
    if block.type == "heading":
        level = min(max(meta.get_int("level", 1), 1), 6)
        return f"{'#' * level} {block.content}"
    if block.type == "code":
        return f"```{meta.get_str('language')}\n{block.content}"
    if block.type == "quote":
        prefix = ">" * (max(meta.get_int("depth"), 0) + 1)
        return "\n".join(f"{prefix} {line}" for line in block.content.split("\n"))
    if block.type == "list":
        indent = _indent(meta.get_int("depth"))
        ordered = meta.get_bool("ordered")
        return "\n".join(
            f"{indent}{f'{n}.' if ordered else '-'} {item}"
            for n, item in enumerate(block.content.split("\n"), start=1)
        )
    if block.type == "checklist":
        indent = _indent(meta.get_int("depth"))
        mark = "x" if meta.get_bool("checked") else " "
        return "\n".join(f"{indent}- [{mark}] {item}" for item in block.content.split("\n"))
    if block.type == "divider":
        return "---"
    if block.type == "image":
        title = meta.get_str("title")
        suffix = f' "{title}"' if title else ""
        return f"![{block.content}]({meta.get_str('url')}{suffix})"
    return block.content

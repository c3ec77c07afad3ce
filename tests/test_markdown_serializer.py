"""Tests for the markdown serializer."""

from decanotes.adapters.markdown_serializer import render_block, serialize_blocks
from decanotes.core.model import Block


def test_render_heading_defaults():
    """Test a heading without level meta renders as level 1."""
    assert render_block(Block("b1", "heading", "Title")) == "# Title"
    assert render_block(Block("b1", "heading", "Title", {"level": 3})) == "### Title"
    assert render_block(Block("b1", "heading", "Title", {"level": 9})) == "###### Title"


def test_render_code():
    """Test code fences with and without a language."""
    assert render_block(Block("b1", "code", "x = 1", {"language": "py"})) == "```py\nx = 1\n```"
    assert render_block(Block("b1", "code", "x")) == "```\nx\n```"


def test_render_lists():
    """Test ordered, unordered and nested lists."""
    assert render_block(Block("b1", "list", "a\nb")) == "- a\n- b"
    assert render_block(Block("b1", "list", "a\nb", {"ordered": True})) == "1. a\n2. b"
    assert render_block(Block("b1", "list", "a", {"depth": 2})) == "    - a"


def test_render_checklist():
    """Test checklist marks and indentation."""
    block = Block("b1", "checklist", "a\nb", {"checked": True, "depth": 1})
    assert render_block(block) == "  - [x] a\n  - [x] b"
    assert render_block(Block("b1", "checklist", "todo")) == "- [ ] todo"


def test_render_quote():
    """Test quote prefixes per line and for an empty quote."""
    assert render_block(Block("b1", "quote", "a\nb")) == "> a\n> b"
    assert render_block(Block("b1", "quote", "", {"depth": 1})) == ">> "


def test_render_image():
    """Test image with optional title."""
    block = Block("b1", "image", "alt", {"url": "a.png", "title": "T"})
    assert render_block(block) == '![alt](a.png "T")'
    assert render_block(Block("b1", "image", "", {"url": "a.png"})) == "![](a.png)"


def test_render_table():
    """Test table header, alignment row and padded rows."""
    block = Block(
        "b1",
        "table",
        "",
        {
            "headers": ["A", "B", "C"],
            "alignments": ["left", "center", "right"],
            "rows": [["1", "2", "3"], ["4"]],
        },
    )
    assert render_block(block) == (
        "| A | B | C |\n"
        "| --- | :---: | ---: |\n"
        "| 1 | 2 | 3 |\n"
        "| 4 |  |  |"
    )


def test_render_table_without_headers():
    """Test a table without headers renders nothing."""
    assert render_block(Block("b1", "table", "", {})) == ""


def test_render_unknown_type_passthrough():
    """Test extended types render their content as-is."""
    assert render_block(Block("b1", "callout", "Heads up")) == "Heads up"


def test_serialize_joiners():
    """Test blank-line separation and single-newline runs."""
    blocks = [
        Block("1", "heading", "A", {"level": 1}),
        Block("2", "paragraph", "B"),
        Block("3", "quote", "q1"),
        Block("4", "quote", "q2"),
        Block("5", "list", "x"),
        Block("6", "list", "y", {"ordered": True}),
        Block("7", "checklist", "t", {"checked": False}),
        Block("8", "checklist", "u", {"checked": True}),
    ]
    assert serialize_blocks(blocks) == (
        "# A\n\nB\n\n> q1\n> q2\n\n- x\n\n1. y\n\n- [ ] t\n- [x] u"
    )


def test_serialize_empty():
    """Test no blocks serialize to an empty string."""
    assert serialize_blocks([]) == ""


def test_serialize_ordered_run_continues_numbering():
    """Test adjacent ordered lists joined into one run number continuously."""
    blocks = [
        Block("1", "list", "a\nb", {"ordered": True}),
        Block("2", "list", "c", {"ordered": True}),
        Block("3", "paragraph", "p"),
        Block("4", "list", "d", {"ordered": True}),
    ]
    assert serialize_blocks(blocks) == "1. a\n2. b\n3. c\n\np\n\n1. d"


def test_serialize_nested_list_restarts_numbering():
    """Test a change of depth starts a new count."""
    blocks = [
        Block("1", "list", "a", {"ordered": True}),
        Block("2", "list", "b", {"ordered": True, "depth": 1}),
    ]
    assert serialize_blocks(blocks) == "1. a\n\n  1. b"

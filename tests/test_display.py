"""Tests for editable display values."""

from decanotes.core.display import display_value
from decanotes.core.model import Block


def test_inactive_shows_content():
    """Test inactive blocks show bare content."""
    block = Block("b1", "heading", "Title", {"level": 2})
    assert display_value(block, is_active=False) == "Title"


def test_active_heading():
    """Test active heading shows its hashes."""
    block = Block("b1", "heading", "Title", {"level": 2})
    assert display_value(block, is_active=True) == "## Title"


def test_active_code():
    """Test active code always has the fence line."""
    assert display_value(Block("b1", "code", "x", {"language": "py"}), True) == "```py\nx"
    assert display_value(Block("b1", "code", ""), True) == "```\n"


def test_active_quote_and_lists():
    """Test per-line prefixes."""
    assert display_value(Block("b1", "quote", "a\nb", {"depth": 1}), True) == ">> a\n>> b"
    assert display_value(Block("b1", "list", "a\nb", {"ordered": True}), True) == "1. a\n2. b"
    assert display_value(Block("b1", "list", "a", {"depth": 1}), True) == "  - a"
    assert display_value(Block("b1", "checklist", "t", {"checked": True}), True) == "- [x] t"


def test_active_divider_and_image():
    """Test divider and image markdown."""
    assert display_value(Block("b1", "divider"), True) == "---"
    image = Block("b1", "image", "alt", {"url": "a.png", "title": "T"})
    assert display_value(image, True) == '![alt](a.png "T")'


def test_active_paragraph_and_table():
    """Test types without a prefix show content."""
    assert display_value(Block("b1", "paragraph", "text"), True) == "text"
    assert display_value(Block("b1", "table", "", {"headers": ["A"]}), True) == ""

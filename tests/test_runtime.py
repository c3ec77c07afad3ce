"""Tests for runtime wiring."""

import tempfile
from pathlib import Path

from decanotes.adapters.idgen import HexId
from decanotes.core.model import Note
from decanotes.runtime import build_runtime


def test_hex_id():
    """Test id length and prefix."""
    assert len(HexId(nbytes=4).new_id()) == 8
    assert HexId(prefix="block-").new_id().startswith("block-")


def test_build_runtime_uses_config():
    """Test config values reach the wired components."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault_path = Path(tmpdir) / "vault"
        vault_path.mkdir()
        (vault_path / "decanotes.toml").write_text("""
[id]
bytes = 3

[editor]
default_mode = "raw"
code_language = "text"
""")

        rt = build_runtime(vault_path=vault_path)

        assert len(rt.idgen.new_id()) == 6
        blocks = rt.parser.parse("```\nx\n```")
        assert blocks[0].meta["language"] == "text"
        assert blocks[0].id.startswith("block-")

        session = rt.open_session("# Hi")
        assert session.get_current_mode() == "raw"
        assert session.get_markdown() == "# Hi"


def test_runtime_vault_round_trip():
    """Test the wired vault stores notes under the vault path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault_path = Path(tmpdir) / "vault"
        rt = build_runtime(vault_path=vault_path)

        nid = rt.idgen.new_id()
        rt.vault.save_note(Note(id=nid, content=rt.parser.parse("# Hello")))

        assert (vault_path / f"{nid}.md").exists()
        assert rt.vault.require(nid).title == "Hello"

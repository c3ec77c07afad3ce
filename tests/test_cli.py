"""Tests for the decanotes CLI."""

import json
import subprocess
import sys
import tempfile
from pathlib import Path


def _run(args, cwd, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "decanotes", *args],
        capture_output=True,
        text=True,
        input=stdin,
        cwd=cwd,
    )


def test_parse_stdin():
    """Test parse prints JSON blocks."""
    with tempfile.TemporaryDirectory() as tmpdir:
        result = _run(["parse"], tmpdir, stdin="# Title\n\n- a\n- b\n")

        assert result.returncode == 0
        blocks = json.loads(result.stdout)
        assert [b["type"] for b in blocks] == ["heading", "list"]
        assert blocks[0]["meta"] == {"level": 1}
        assert blocks[1]["content"] == "a\nb"


def test_render_file():
    """Test render turns JSON blocks into markdown."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "blocks.json"
        path.write_text(json.dumps([
            {"id": "1", "type": "heading", "content": "T", "meta": {"level": 2}},
            {"id": "2", "type": "checklist", "content": "x", "meta": {"checked": True}},
        ]))
        result = _run(["render", str(path)], tmpdir)

        assert result.returncode == 0
        assert result.stdout == "## T\n\n- [x] x\n"


def test_render_invalid_json():
    """Test malformed JSON is reported on stderr."""
    with tempfile.TemporaryDirectory() as tmpdir:
        result = _run(["render"], tmpdir, stdin="{nope")

        assert result.returncode == 1
        assert "Error:" in result.stderr


def test_fmt():
    """Test fmt normalizes markdown."""
    with tempfile.TemporaryDirectory() as tmpdir:
        result = _run(["fmt"], tmpdir, stdin="#   Title\n\n\n*  item\n")

        assert result.returncode == 0
        assert result.stdout == "# Title\n\n- item\n"


def test_note_lifecycle():
    """Test new, ls, show, export and rm against a vault."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = str(Path(tmpdir) / "vault")

        result = _run(["--vault", vault, "new", "--title", "Groceries", "--color", "sage"], tmpdir)
        assert result.returncode == 0
        nid = result.stdout.strip()
        assert (Path(vault) / f"{nid}.md").exists()

        result = _run(["--vault", vault, "ls"], tmpdir)
        assert result.returncode == 0
        assert result.stdout.startswith(f"{nid}\tGroceries")

        result = _run(["--vault", vault, "show", nid, "--json"], tmpdir)
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["title"] == "Groceries"
        assert data["color"] == "sage"
        assert data["content"][0]["type"] == "heading"

        result = _run(["--vault", vault, "export", nid], tmpdir)
        assert result.returncode == 0
        assert result.stdout == "# Groceries\n"

        result = _run(["--vault", vault, "rm", nid], tmpdir)
        assert result.returncode == 0
        assert not (Path(vault) / f"{nid}.md").exists()


def test_new_from_file():
    """Test creating a note from a markdown file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir) / "vault"
        source = Path(tmpdir) / "draft.md"
        source.write_text("## Plan\n\n1. write\n2. test\n")

        result = _run(["--vault", str(vault), "-q", "new", "--from", str(source)], tmpdir)
        assert result.returncode == 0
        assert result.stdout == ""

        (path,) = vault.glob("*.md")
        text = path.read_text()
        assert "title: Plan" in text
        assert text.endswith("## Plan\n\n1. write\n2. test\n")


def test_missing_note():
    """Test show and rm on an unknown id fail with exit code 1."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = str(Path(tmpdir) / "vault")

        result = _run(["--vault", vault, "show", "nope"], tmpdir)
        assert result.returncode == 1
        assert "Note nope not found" in result.stderr

        result = _run(["--vault", vault, "rm", "nope"], tmpdir)
        assert result.returncode == 1


def test_config_default_color():
    """Test notes pick up the configured default color."""
    with tempfile.TemporaryDirectory() as tmpdir:
        Path(tmpdir, "decanotes.toml").write_text('[vault]\nroot = "notes"\n\n[notes]\ndefault_color = "peach"\n')

        result = _run(["new", "--title", "Hi"], tmpdir)
        assert result.returncode == 0
        nid = result.stdout.strip()

        result = _run(["show", nid, "--json"], tmpdir)
        assert json.loads(result.stdout)["color"] == "peach"


def test_invalid_config():
    """Test an invalid config value is reported."""
    with tempfile.TemporaryDirectory() as tmpdir:
        Path(tmpdir, "decanotes.toml").write_text('[editor]\ndefault_mode = "wysiwyg"\n')

        result = _run(["ls"], tmpdir)
        assert result.returncode == 1
        assert "default_mode" in result.stderr


def test_invalid_utf8_input():
    """Test unreadable bytes are reported as an error, not a traceback."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.md"
        path.write_bytes(b"# Title\n\xff\n")

        result = _run(["parse", str(path)], tmpdir)
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "Traceback" not in result.stderr


def test_ls_skips_invalid_utf8_note():
    """Test listing a vault with an undecodable file still succeeds."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir) / "vault"
        result = _run(["--vault", str(vault), "new", "--title", "Kept"], tmpdir)
        nid = result.stdout.strip()
        (vault / "bad.md").write_bytes(b"\xff")

        result = _run(["--vault", str(vault), "ls"], tmpdir)
        assert result.returncode == 0
        assert result.stdout.startswith(f"{nid}\tKept")
        assert "bad" not in result.stdout

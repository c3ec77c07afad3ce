"""CLI for decanotes - block-based markdown notes."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.json_codec import dumps_blocks, loads_blocks, note_to_dict
from .core.model import NOTE_COLORS, Note
from .errors import CodecError, DecanotesError
from .runtime import build_runtime


def _read_input(path: str | None) -> str:
    """Contents of `path`, or stdin for None / "-"."""
    try:
        if path is None or path == "-":
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        source = path or "stdin"
        raise CodecError(f"{source}: not valid UTF-8 ({e.reason} at byte {e.start})") from e


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Print markdown as JSON blocks."""
    blocks = rt.parser.parse(_read_input(args.file))
    print(dumps_blocks(blocks))
    return 0


def cmd_render(args: argparse.Namespace, rt: Any) -> int:
    """Print JSON blocks as markdown."""
    blocks = loads_blocks(_read_input(args.file))
    print(rt.serializer.serialize(blocks))
    return 0


def cmd_fmt(args: argparse.Namespace, rt: Any) -> int:
    """Normalize markdown by a parse/serialize round trip."""
    blocks = rt.parser.parse(_read_input(args.file))
    print(rt.serializer.serialize(blocks))
    return 0


def cmd_new(args: argparse.Namespace, rt: Any) -> int:
    """Create a new note."""
    nid = rt.idgen.new_id()

    if args.source:
        body = _read_input(args.source)
    else:
        body = f"# {args.title}" if args.title else ""

    note = Note(
        id=nid,
        title=args.title or "",
        content=rt.parser.parse(body),
        color=args.color or rt.config.notes.default_color,
    )
    rt.vault.save_note(note)

    if not args.quiet:
        print(nid)
    return 0


def cmd_ls(args: argparse.Namespace, rt: Any) -> int:
    """List notes, most recently updated first."""
    notes = rt.vault.get_notes()
    if args.json:
        print(json.dumps([note_to_dict(n) for n in notes], indent=2, ensure_ascii=False))
        return 0
    for note in notes:
        print(f"{note.id}\t{note.title}\t{note.preview}")
    return 0


def cmd_show(args: argparse.Namespace, rt: Any) -> int:
    """Print a note."""
    note = rt.vault.require(args.id)
    if args.json:
        print(json.dumps(note_to_dict(note), indent=2, ensure_ascii=False))
        return 0
    print(f"# {note.id}: {note.title} [{note.color}]")
    print(f"updated {note.updated_at.isoformat()}")
    print()
    print(rt.serializer.serialize(note.content))
    return 0


def cmd_export(args: argparse.Namespace, rt: Any) -> int:
    """Print a note's markdown body without front matter."""
    note = rt.vault.require(args.id)
    markdown = rt.serializer.serialize(note.content)
    if args.out:
        Path(args.out).write_text(markdown + "\n", encoding="utf-8")
        if not args.quiet:
            print(f"Exported {note.id} to {args.out}")
    else:
        print(markdown)
    return 0


def cmd_rm(args: argparse.Namespace, rt: Any) -> int:
    """Delete a note."""
    if not rt.vault.delete_note(args.id):
        print(f"Error: Note {args.id} not found", file=sys.stderr)
        return 1
    if not args.quiet:
        print(f"Deleted {args.id}")
    return 0


def _version_text() -> str:
    return f"decanotes {__version__} (python {platform.python_version()}, platform {platform.platform()})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decanotes", description="Decanotes CLI"
    )
    parser.add_argument("--version", action="version", version=_version_text())
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/decanotes.toml, vault/decanotes.toml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to vault directory (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # conversion commands
    parser_parse = subparsers.add_parser("parse", help="Markdown to JSON blocks")
    parser_parse.add_argument("file", nargs="?", help="Markdown file (default: stdin)")

    parser_render = subparsers.add_parser("render", help="JSON blocks to markdown")
    parser_render.add_argument("file", nargs="?", help="JSON file (default: stdin)")

    parser_fmt = subparsers.add_parser("fmt", help="Normalize markdown")
    parser_fmt.add_argument("file", nargs="?", help="Markdown file (default: stdin)")

    # note commands
    parser_new = subparsers.add_parser("new", help="Create a new note")
    parser_new.add_argument("--title", help="Note title")
    parser_new.add_argument("--color", choices=NOTE_COLORS, help="Note color")
    parser_new.add_argument(
        "--from", dest="source", help="Initial body from a markdown file ('-' for stdin)"
    )

    parser_ls = subparsers.add_parser("ls", help="List notes")
    parser_ls.add_argument("--json", action="store_true", help="Machine-readable output")

    parser_show = subparsers.add_parser("show", help="Print a note")
    parser_show.add_argument("id", help="Note ID")
    parser_show.add_argument("--json", action="store_true", help="Machine-readable output")

    parser_export = subparsers.add_parser("export", help="Print a note as plain markdown")
    parser_export.add_argument("id", help="Note ID")
    parser_export.add_argument("--out", help="Write to this file instead of stdout")

    parser_rm = subparsers.add_parser("rm", help="Delete a note")
    parser_rm.add_argument("id", help="Note ID")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "parse": cmd_parse,
        "render": cmd_render,
        "fmt": cmd_fmt,
        "new": cmd_new,
        "ls": cmd_ls,
        "show": cmd_show,
        "export": cmd_export,
        "rm": cmd_rm,
    }

    try:
        rt = build_runtime(vault_path=args.vault, config_path=args.config)
        exit_code = handlers[args.cmd](args, rt)
    except (DecanotesError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

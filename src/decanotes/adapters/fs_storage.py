import logging
from pathlib import Path
from typing import Iterable

from ..core.ports import StorageStrategy
from ..errors import CodecError

logger = logging.getLogger(__name__)


class FsStorage(StorageStrategy):
    def __init__(self, root: Path):
        self.root = root

    def path_for(self, id: str) -> Path:
        return self.root / f"{id}.md"

    def read_raw(self, id: str) -> str | None:
        p = self.path_for(id)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"{p}: not valid UTF-8 ({e.reason} at byte {e.start})") from e

    def write_raw(self, id: str, contents: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        p = self.path_for(id)
        # Write to a sibling temp file, then swap it in
        tmp = p.with_suffix(".md.tmp")
        try:
            tmp.write_text(contents, encoding="utf-8")
            tmp.replace(p)
        except OSError:
            if tmp.exists():
                tmp.unlink()
            raise
        logger.debug("wrote %s (%d chars)", p, len(contents))

    def delete_raw(self, id: str) -> bool:
        p = self.path_for(id)
        if not p.exists():
            return False
        p.unlink()
        logger.debug("deleted %s", p)
        return True

    def list_all_ids(self) -> Iterable[str]:
        if not self.root.exists():
            return []
        return sorted(p.stem for p in self.root.glob("*.md"))

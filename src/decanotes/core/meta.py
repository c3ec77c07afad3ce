from typing import Any, Iterator, MutableMapping


class BlockMeta(MutableMapping[str, Any]):
    """
    Open key-set metadata attached to a block. Recognised keys by block type:
    - heading: "level" (1-6)
    - code: "language", "showLineNumbers"
    - list: "ordered", "depth"
    - checklist: "checked", "depth"
    - quote: "depth"
    - image: "url", "alt", "title"
    - table: "headers", "rows", "alignments"
    Unknown keys are carried through untouched.
    """

    def __init__(self, initial: MutableMapping[str, Any] | dict | None = None):
        self._d = dict(initial or {})

    # MutableMapping interface
    def __getitem__(self, k: str) -> Any:
        return self._d[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self._d[k] = v

    def __delitem__(self, k: str) -> None:
        del self._d[k]

    def __iter__(self) -> Iterator[str]:
        return iter(self._d)

    def __len__(self) -> int:
        return len(self._d)

    def __repr__(self) -> str:
        return f"BlockMeta({self._d!r})"

    def copy(self) -> "BlockMeta":
        return BlockMeta(self._d)

    # Typed accessors; a missing or wrongly typed value yields the default
    def get_str(self, key: str, default: str = "") -> str:
        v = self._d.get(key, default)
        return v if isinstance(v, str) else default

    def get_int(self, key: str, default: int = 0) -> int:
        v = self._d.get(key, default)
        if isinstance(v, bool) or not isinstance(v, int):
            return default
        return v

    def get_bool(self, key: str, default: bool = False) -> bool:
        v = self._d.get(key, default)
        return v if isinstance(v, bool) else default

    def get_list(self, key: str) -> list:
        v = self._d.get(key)
        return list(v) if isinstance(v, (list, tuple)) else []

import secrets

from ..core.ports import IdGenerator


class HexId(IdGenerator):
    """Random lowercase hex ids, optionally prefixed (e.g. "block-")."""

    def __init__(self, nbytes: int = 6, prefix: str = ""):  # 6 bytes -> 12 hex chars
        self.nbytes = nbytes
        self.prefix = prefix

    def new_id(self) -> str:
        return f"{self.prefix}{secrets.token_hex(self.nbytes)}"

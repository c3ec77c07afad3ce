"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_storage import FsStorage
from .adapters.idgen import HexId
from .adapters.markdown_parser import MarkdownParser
from .adapters.markdown_serializer import MarkdownSerializer
from .adapters.yaml_codec import MarkdownNoteCodec, YamlFrontmatter
from .config import DecanotesConfig, load_config
from .core.session import EditorSession
from .core.vault import Vault


@dataclass
class Runtime:
    """Container for all wired components."""
    vault: Vault
    parser: MarkdownParser
    serializer: MarkdownSerializer
    idgen: HexId
    block_ids: HexId
    config: DecanotesConfig

    def open_session(self, markdown: str = "") -> EditorSession:
        """Editor session for `markdown` using the configured defaults."""
        return EditorSession(
            self.parser,
            self.serializer,
            markdown,
            mode=self.config.editor.default_mode,
            default_language=self.config.editor.code_language,
            idgen=self.block_ids,
        )


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """Build and wire all components for a vault."""
    config = load_config(config_path=config_path, vault_path=vault_path)

    # Use config values if CLI args not provided
    if vault_path is None:
        vault_path = config.vault.root

    block_ids = HexId(prefix="block-")
    parser = MarkdownParser(idgen=block_ids, default_language=config.editor.code_language)
    serializer = MarkdownSerializer()
    codec = MarkdownNoteCodec(YamlFrontmatter(), parser, serializer)
    vault = Vault(FsStorage(vault_path), codec)

    return Runtime(
        vault=vault,
        parser=parser,
        serializer=serializer,
        idgen=HexId(nbytes=config.id.bytes),
        block_ids=block_ids,
        config=config,
    )

"""Configuration loader for decanotes.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .core.model import NOTE_COLORS
from .errors import ConfigError

CONFIG_NAME = "decanotes.toml"
EDITOR_MODES = ("edit", "raw")


@dataclass
class VaultConfig:
    """Vault-specific configuration."""
    root: Path


@dataclass
class IdConfig:
    """ID generation configuration."""
    bytes: int = 6


@dataclass
class EditorConfig:
    """Editor defaults."""
    default_mode: str = "edit"
    code_language: str = "plaintext"


@dataclass
class NotesConfig:
    default_color: str = "default"


@dataclass
class DecanotesConfig:
    """Complete decanotes configuration."""
    vault: VaultConfig
    id: IdConfig = field(default_factory=IdConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    notes: NotesConfig = field(default_factory=NotesConfig)


def load_config(config_path: Path | None = None, vault_path: Path | None = None) -> DecanotesConfig:
    """
    Load configuration from decanotes.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/decanotes.toml
    3. vault_path/decanotes.toml

    Args:
        config_path: Explicit path to config file
        vault_path: Vault root path for fallback search

    Returns:
        DecanotesConfig with resolved settings

    Raises:
        ConfigError: The file is not valid TOML or holds an unsupported value
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_NAME)
    if vault_path:
        search_paths.append(vault_path / CONFIG_NAME)

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
            break

    vault_data = toml_data.get("vault", {})
    vault_config = VaultConfig(root=Path(vault_data.get("root", vault_path or Path("./vault"))))

    id_data = toml_data.get("id", {})
    nbytes = id_data.get("bytes", 6)
    if isinstance(nbytes, bool) or not isinstance(nbytes, int) or nbytes < 1:
        raise ConfigError(f"id.bytes must be a positive integer, got {nbytes!r}")

    editor_data = toml_data.get("editor", {})
    editor_config = EditorConfig(
        default_mode=editor_data.get("default_mode", "edit"),
        code_language=editor_data.get("code_language", "plaintext"),
    )
    if editor_config.default_mode not in EDITOR_MODES:
        raise ConfigError(
            f"editor.default_mode must be one of {', '.join(EDITOR_MODES)}, "
            f"got {editor_config.default_mode!r}"
        )

    notes_data = toml_data.get("notes", {})
    notes_config = NotesConfig(default_color=notes_data.get("default_color", "default"))
    if notes_config.default_color not in NOTE_COLORS:
        raise ConfigError(f"notes.default_color must be one of {', '.join(NOTE_COLORS)}")

    return DecanotesConfig(
        vault=vault_config,
        id=IdConfig(bytes=nbytes),
        editor=editor_config,
        notes=notes_config,
    )

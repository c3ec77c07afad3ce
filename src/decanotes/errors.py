"""Exception hierarchy for decanotes.

The conversion engine itself never raises; these cover the layers around it:
- DecanotesError: base class, caught by the CLI
- NoteNotFoundError: a note id that has to exist does not
- CodecError: a note file or JSON payload cannot be decoded
- ConfigError: invalid configuration values
"""


class DecanotesError(Exception):
    """Base exception for all decanotes errors."""


class NoteNotFoundError(DecanotesError):
    def __init__(self, note_id: str):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class CodecError(DecanotesError):
    """Raised when stored or exchanged data cannot be decoded."""


class ConfigError(DecanotesError):
    """Raised for invalid configuration values."""

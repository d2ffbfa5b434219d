"""Store-level error classes."""

from noteable.errors.base import BaseNoteableError


class NoteStoreError(BaseNoteableError):
    """Base exception for all store-level errors."""


class StoreSetupError(NoteStoreError):
    """Raised when a store cannot be opened."""


class InvalidFileExtensionError(StoreSetupError):
    """Raised when the backing file does not carry the required extension."""

    def __init__(self, file_path: str, extension: str):
        super().__init__(
            message=f"File path {file_path} is not a {extension} file.",
            extra_info={"file_path": file_path, "extension": extension},
        )


class InvalidLineError(StoreSetupError):
    """Raised when a line of the backing file is neither a comment nor a single `key=value` pair."""

    line_number: int

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number

        super().__init__(
            message=f"Line {line_number} is not valid.",
            extra_info={"line_number": line_number, "line": line},
        )

from typing_extensions import override

from noteable.storage.base import BaseNoteStorage


class MemoryNoteStorage(BaseNoteStorage):
    """An in-memory buffer standing in for a note file, for testing and development."""

    _text: str | None

    def __init__(self, text: str | None = "") -> None:
        """Initialize the buffer.

        Args:
            text: The initial contents. `None` behaves like a file that does not exist yet.
        """
        self._text = text

    @override
    def exists(self) -> bool:
        return self._text is not None

    @override
    def read(self) -> str:
        if self._text is None:
            msg = "Memory storage has not been created"
            raise FileNotFoundError(msg)

        return self._text

    @override
    def write(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str | None:
        return self._text

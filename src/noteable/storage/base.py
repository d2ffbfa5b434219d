"""Storage backends hold the raw text of a note file."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class NoteStorage(Protocol):
    """Protocol defining the interface a NoteStore reads from and writes to."""

    def exists(self) -> bool:
        """Check if the backing text exists."""
        ...

    def create(self) -> None:
        """Create empty backing text."""
        ...

    def read(self) -> str:
        """Return the full backing text."""
        ...

    def write(self, text: str) -> None:
        """Replace the full backing text."""
        ...

    def clear(self) -> None:
        """Truncate the backing text."""
        ...


class BaseNoteStorage(ABC):
    """Base class for storage backends."""

    @abstractmethod
    def exists(self) -> bool: ...

    @abstractmethod
    def read(self) -> str: ...

    @abstractmethod
    def write(self, text: str) -> None: ...

    def create(self) -> None:
        self.write(text="")

    def clear(self) -> None:
        self.write(text="")

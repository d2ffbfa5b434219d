"""
Test configuration and fixtures.
"""

from pathlib import Path

import pytest

from noteable import MemoryNoteStorage, NoteStore


@pytest.fixture
def note_path(tmp_path: Path) -> Path:
    return tmp_path / "test.noteable"


@pytest.fixture
def store(note_path: Path) -> NoteStore:
    """A fresh, empty file-backed store that suppresses operation errors."""
    return NoteStore(note_path)


@pytest.fixture
def strict_store(note_path: Path) -> NoteStore:
    """A fresh, empty file-backed store that raises operation errors."""
    return NoteStore(note_path, throw_on_error=True)


@pytest.fixture
def memory_storage() -> MemoryNoteStorage:
    return MemoryNoteStorage()


@pytest.fixture(params=["file", "memory"])
def any_store(request: pytest.FixtureRequest, note_path: Path, memory_storage: MemoryNoteStorage) -> NoteStore:
    """Parameterized fixture that runs a test against both storage backends."""
    if request.param == "memory":
        return NoteStore(storage=memory_storage)

    return NoteStore(note_path)

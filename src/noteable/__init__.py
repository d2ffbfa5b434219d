"""A tiny key-value store persisted to a flat `key=value` text file."""

from noteable.settings import NoteStoreSettings
from noteable.storage import FileNoteStorage, MemoryNoteStorage, NoteStorage
from noteable.store import DEFAULT_FILE_PATH, NOTE_FILE_EXTENSION, NoteStore
from noteable.utils import auto_parse

__all__ = [
    "DEFAULT_FILE_PATH",
    "NOTE_FILE_EXTENSION",
    "FileNoteStorage",
    "MemoryNoteStorage",
    "NoteStorage",
    "NoteStore",
    "NoteStoreSettings",
    "auto_parse",
]

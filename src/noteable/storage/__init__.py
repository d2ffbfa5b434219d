from noteable.storage.base import BaseNoteStorage, NoteStorage
from noteable.storage.file import FileNoteStorage
from noteable.storage.memory import MemoryNoteStorage

__all__ = ["BaseNoteStorage", "FileNoteStorage", "MemoryNoteStorage", "NoteStorage"]

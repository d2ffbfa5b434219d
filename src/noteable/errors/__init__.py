"""Error classes for noteable stores.

Exception Hierarchy:
    BaseNoteableError
    ├── NoteOperationError (operation-level errors)
    │   ├── MissingKeyError
    │   ├── KeyExistsError
    │   ├── DuplicateKeyError
    │   ├── InvalidKeyError
    │   └── InvalidValueError
    └── NoteStoreError (store-level errors)
        └── StoreSetupError
            ├── InvalidFileExtensionError
            └── InvalidLineError
"""

from noteable.errors.base import BaseNoteableError, ExtraInfoType
from noteable.errors.key_value import (
    DuplicateKeyError,
    InvalidKeyError,
    InvalidValueError,
    KeyExistsError,
    MissingKeyError,
    NoteOperationError,
)
from noteable.errors.store import InvalidFileExtensionError, InvalidLineError, NoteStoreError, StoreSetupError

__all__ = [
    "BaseNoteableError",
    "DuplicateKeyError",
    "ExtraInfoType",
    "InvalidFileExtensionError",
    "InvalidKeyError",
    "InvalidLineError",
    "InvalidValueError",
    "KeyExistsError",
    "MissingKeyError",
    "NoteOperationError",
    "NoteStoreError",
    "StoreSetupError",
]

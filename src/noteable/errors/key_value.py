from noteable.errors.base import BaseNoteableError


class NoteOperationError(BaseNoteableError):
    """Base exception for all errors raised by an operation on an open store."""


class MissingKeyError(NoteOperationError):
    """Raised when a key is missing from the store."""

    def __init__(self, operation: str, key: str | None = None):
        super().__init__(
            message="A key was requested that was required but not found in the store.",
            extra_info={"operation": operation, "key": key},
        )


class KeyExistsError(NoteOperationError):
    """Raised when setting a key that is already present."""

    def __init__(self, operation: str, key: str | None = None):
        super().__init__(
            message="A key was set that already exists in the store.",
            extra_info={"operation": operation, "key": key},
        )


class DuplicateKeyError(NoteOperationError):
    """Raised when a key appears on more than one line."""

    def __init__(self, operation: str, key: str | None = None, count: int = 0):
        super().__init__(
            message="A key was requested that appears on more than one line.",
            extra_info={"operation": operation, "key": key, "count": count},
        )


class InvalidKeyError(NoteOperationError):
    """Raised when a key cannot be written as a single `key=value` line."""

    def __init__(self, key: str, reason: str):
        super().__init__(message="The key cannot be stored.", extra_info={"key": key, "reason": reason})


class InvalidValueError(NoteOperationError):
    """Raised when a value cannot be written as a single `key=value` line."""

    def __init__(self, key: str, reason: str):
        super().__init__(message="The value cannot be stored.", extra_info={"key": key, "reason": reason})

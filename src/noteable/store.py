import logging
from collections.abc import Sized
from pathlib import Path
from typing import Any

from typing_extensions import Self

from noteable.errors import (
    BaseNoteableError,
    DuplicateKeyError,
    InvalidFileExtensionError,
    InvalidKeyError,
    InvalidLineError,
    InvalidValueError,
    KeyExistsError,
    MissingKeyError,
)
from noteable.settings import DEFAULT_AUTO_PARSE, DEFAULT_FILE_PATH_SENTINEL, DEFAULT_THROW_ON_ERROR, NoteStoreSettings
from noteable.storage import FileNoteStorage, NoteStorage
from noteable.utils import auto_parse, to_raw

logger = logging.getLogger(__name__)

DEFAULT_FILE_PATH = "./note.noteable"
NOTE_FILE_EXTENSION = ".noteable"

COMMENT_PREFIX = "#"
SEPARATOR = "="
LINE_BREAK = "\n"
FORBIDDEN_CHARACTERS = (SEPARATOR, "\n", "\r")


def resolve_file_path(file_path: Path | str | None) -> str:
    """Resolve the `"default"` sentinel and check the note file extension."""
    if not file_path or str(file_path).lower() == DEFAULT_FILE_PATH_SENTINEL:
        return DEFAULT_FILE_PATH

    file_path = str(file_path)

    if not file_path.endswith(NOTE_FILE_EXTENSION):
        raise InvalidFileExtensionError(file_path=file_path, extension=NOTE_FILE_EXTENSION)

    return file_path


def split_lines(text: str) -> list[str]:
    return [line.removesuffix("\r") for line in text.split(LINE_BREAK)]


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_PREFIX)


def is_blank(line: str) -> bool:
    return len(line) <= 1


def is_invalid(line: str) -> bool:
    """A line is invalid if it is a non-blank line that is neither a comment nor a pair, or if it has more than one separator."""
    if line.count(SEPARATOR) > 1:
        return True

    return not is_comment(line) and SEPARATOR not in line and not is_blank(line)


def line_key(line: str) -> str | None:
    """Return the key of a `key=value` line, or None for comments and other lines."""
    if is_comment(line) or SEPARATOR not in line:
        return None

    return line.split(SEPARATOR, 1)[0]


def line_value(line: str) -> str:
    return line.split(SEPARATOR, 1)[1]


class NoteStore:
    """A key-value store backed by a flat `key=value` text file.

    The whole file is loaded into memory at construction, validated, and compacted (blank lines are
    dropped). Every mutation rewrites the whole file.

    Missing, already-present and duplicated keys are reported with `MissingKeyError`, `KeyExistsError`
    and `DuplicateKeyError`. Whether those are raised is decided per call by `raise_on_error`; when it
    is None the store-wide `throw_on_error` applies, and a suppressed error makes the operation return
    None (or False) without changing anything.

    Example:
        store = NoteStore("settings.noteable")
        store.set("years", "2021")
        store.get("years")  # 2021
    """

    auto_parse: bool
    throw_on_error: bool

    _storage: NoteStorage
    _lines: list[str]

    def __init__(
        self,
        file_path: Path | str | None = DEFAULT_FILE_PATH_SENTINEL,
        *,
        auto_parse: bool = DEFAULT_AUTO_PARSE,
        throw_on_error: bool = DEFAULT_THROW_ON_ERROR,
        storage: NoteStorage | None = None,
    ) -> None:
        """Open a note store, creating the backing file if needed.

        Args:
            file_path: The path of the `.noteable` file, or `"default"` for `./note.noteable`. Ignored when `storage` is given.
            auto_parse: Whether values are converted to native types on read.
            throw_on_error: Whether missing, existing and duplicated keys raise by default.
            storage: A storage backend to use instead of a file.

        Raises:
            InvalidFileExtensionError: If the path does not end in `.noteable`.
            InvalidLineError: If a line of the file is not valid.
        """
        self.auto_parse = auto_parse
        self.throw_on_error = throw_on_error

        if storage is None:
            storage = FileNoteStorage(path=resolve_file_path(file_path=file_path))

        self._storage = storage
        self._lines = []

        if not self._storage.exists():
            self._storage.create()

        self.reload()

    @classmethod
    def from_settings(cls, settings: NoteStoreSettings, *, storage: NoteStorage | None = None) -> Self:
        return cls(
            settings.file_path,
            auto_parse=settings.auto_parse,
            throw_on_error=settings.throw_on_error,
            storage=storage,
        )

    @property
    def file_path(self) -> Path | None:
        """The path of the backing file, or None when the store is not file backed."""
        if isinstance(self._storage, FileNoteStorage):
            return self._storage.path

        return None

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def reload(self) -> None:
        """Re-read the backing storage, discarding the in-memory lines."""
        lines = split_lines(text=self._storage.read())

        self._validate(lines=lines)

        compacted = [line for line in lines if not is_blank(line)]

        logger.debug("Loaded %d lines, dropped %d blank lines", len(compacted), len(lines) - len(compacted))

        self._persist(lines=compacted)

    def _validate(self, lines: list[str]) -> None:
        for line_number, line in enumerate(lines, start=1):
            if is_invalid(line):
                raise InvalidLineError(line_number=line_number, line=line)

    def _persist(self, lines: list[str]) -> None:
        """Write `lines` to storage, then adopt them. A failed write leaves the in-memory lines untouched."""
        self._storage.write(text=LINE_BREAK.join(lines))

        self._lines = lines

    def _fail(self, error: BaseNoteableError, raise_on_error: bool | None) -> None:
        if (self.throw_on_error if raise_on_error is None else raise_on_error):
            raise error

        logger.debug("Suppressed error: %s", error)

    def _matching_indexes(self, key: str) -> list[int]:
        return [index for index, line in enumerate(self._lines) if line_key(line) == key]

    def _format_line(self, key: str, value: Any) -> str:
        if not key:
            raise InvalidKeyError(key=key, reason="empty")

        if is_comment(key):
            raise InvalidKeyError(key=key, reason="starts with a comment marker")

        if any(character in key for character in FORBIDDEN_CHARACTERS):
            raise InvalidKeyError(key=key, reason="contains a separator or line break")

        raw = to_raw(value=value)

        if any(character in raw for character in FORBIDDEN_CHARACTERS):
            raise InvalidValueError(key=key, reason="contains a separator or line break")

        return f"{key}{SEPARATOR}{raw}"

    def _parse(self, raw: str) -> Any:
        return auto_parse(raw=raw) if self.auto_parse else raw

    def key_exists(self, key: str) -> bool:
        """Check if any `key=value` line carries `key`."""
        return any(line_key(line) == key for line in self._lines)

    def has(self, key: str) -> bool:
        return self.key_exists(key=key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.key_exists(key=key)

    def get(self, key: str, *, raise_on_error: bool | None = None) -> Any:
        """Get the value of `key`, auto-parsed when enabled.

        Returns None when the key is missing or duplicated and errors are suppressed.
        """
        indexes = self._matching_indexes(key=key)

        if not indexes:
            self._fail(MissingKeyError(operation="get", key=key), raise_on_error=raise_on_error)
            return None

        if len(indexes) > 1:
            self._fail(DuplicateKeyError(operation="get", key=key, count=len(indexes)), raise_on_error=raise_on_error)
            return None

        return self._parse(raw=line_value(self._lines[indexes[0]]))

    def set(self, key: str, value: Any, *, raise_on_error: bool | None = None) -> None:
        """Append a new `key=value` line. Does nothing if the key exists and errors are suppressed."""
        line = self._format_line(key=key, value=value)

        if self.key_exists(key=key):
            self._fail(KeyExistsError(operation="set", key=key), raise_on_error=raise_on_error)
            return

        self._persist(lines=[*self._lines, line])

    def change(self, key: str, value: Any, *, raise_on_error: bool | None = None) -> None:
        """Replace every line carrying `key`, in place."""
        line = self._format_line(key=key, value=value)

        indexes = self._matching_indexes(key=key)

        if not indexes:
            self._fail(MissingKeyError(operation="change", key=key), raise_on_error=raise_on_error)
            return

        lines = list(self._lines)

        for index in indexes:
            lines[index] = line

        self._persist(lines=lines)

    def remove(self, key: str, *, raise_on_error: bool | None = None) -> bool:
        """Remove every line carrying `key`.

        Returns:
            True if any line was removed.
        """
        if not self.key_exists(key=key):
            self._fail(MissingKeyError(operation="remove", key=key), raise_on_error=raise_on_error)
            return False

        self._persist(lines=[line for line in self._lines if line_key(line) != key])

        return True

    def remove_all(self) -> None:
        """Truncate the backing storage, comments included."""
        self._storage.clear()

        self._lines = []

    def type_of(self, key: str, *, raise_on_error: bool | None = None) -> type:
        return type(self.get(key=key, raise_on_error=raise_on_error))

    def get_all(self) -> list[dict[str, Any]]:
        """Return one single-entry mapping per `key=value` line, in file order. Comments are skipped."""
        entries: list[dict[str, Any]] = []

        for line in self._lines:
            key = line_key(line)

            if key is None:
                continue

            entries.append({key: self._parse(raw=line_value(line))})

        return entries

    def is_empty(self, key: str, *, raise_on_error: bool | None = None) -> bool:
        value = self.get(key=key, raise_on_error=raise_on_error)

        if value is None:
            return True

        return isinstance(value, Sized) and len(value) == 0

import logging
import os
from pathlib import Path

from typing_extensions import override

from noteable.storage.base import BaseNoteStorage

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
TEMP_SUFFIX = ".tmp"


class FileNoteStorage(BaseNoteStorage):
    """A single text file on disk.

    Writes go to a sibling temporary file which is then moved over the target with
    `os.replace`, so the file only ever holds a complete state. There is no locking:
    two writers on the same path are last-writer-wins.
    """

    _path: Path

    def __init__(self, path: Path | str) -> None:
        """Initialize the file storage.

        Args:
            path: The path of the backing file. It is not created until `create` is called.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @override
    def exists(self) -> bool:
        return self._path.exists()

    @override
    def create(self) -> None:
        logger.debug("Creating empty note file %s", self._path)
        self._path.touch()

    @override
    def read(self) -> str:
        return self._path.read_text(encoding=ENCODING)

    @override
    def write(self, text: str) -> None:
        temp_path = self._path.with_name(self._path.name + TEMP_SUFFIX)

        try:
            with temp_path.open(mode="w", encoding=ENCODING, newline="") as f:
                _ = f.write(text)

            os.replace(temp_path, self._path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %d characters to %s", len(text), self._path)

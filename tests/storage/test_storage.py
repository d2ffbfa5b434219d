from pathlib import Path

import pytest

from noteable.storage import FileNoteStorage, MemoryNoteStorage, NoteStorage


@pytest.mark.parametrize(
    argnames=("storage_type"),
    argvalues=[FileNoteStorage, MemoryNoteStorage],
)
def test_implements_protocol(storage_type: type):
    assert issubclass(storage_type, NoteStorage)


class TestFileNoteStorage:
    @pytest.fixture
    def storage(self, tmp_path: Path) -> FileNoteStorage:
        return FileNoteStorage(path=tmp_path / "test.noteable")

    def test_create(self, storage: FileNoteStorage):
        assert not storage.exists()
        storage.create()
        assert storage.exists()
        assert storage.read() == ""

    def test_write_read(self, storage: FileNoteStorage):
        storage.write(text="a=1\nb=2")
        assert storage.read() == "a=1\nb=2"
        assert storage.path.read_bytes() == b"a=1\nb=2"

    def test_write_replaces_contents(self, storage: FileNoteStorage):
        storage.write(text="a=1\nb=2")
        storage.write(text="c=3")
        assert storage.read() == "c=3"

    def test_write_leaves_no_temp_file(self, storage: FileNoteStorage, tmp_path: Path):
        storage.write(text="a=1")
        assert [path.name for path in tmp_path.iterdir()] == ["test.noteable"]

    def test_clear(self, storage: FileNoteStorage):
        storage.write(text="a=1")
        storage.clear()
        assert storage.read() == ""

    def test_unicode(self, storage: FileNoteStorage):
        storage.write(text="greeting=héllo wörld")
        assert storage.read() == "greeting=héllo wörld"

    def test_read_missing_file(self, storage: FileNoteStorage):
        with pytest.raises(FileNotFoundError):
            _ = storage.read()


class TestMemoryNoteStorage:
    def test_defaults_to_empty(self):
        storage = MemoryNoteStorage()
        assert storage.exists()
        assert storage.read() == ""

    def test_missing(self):
        storage = MemoryNoteStorage(text=None)
        assert not storage.exists()

        with pytest.raises(FileNotFoundError):
            _ = storage.read()

        storage.create()
        assert storage.read() == ""

    def test_write_read_clear(self):
        storage = MemoryNoteStorage(text="a=1")
        storage.write(text="b=2")
        assert storage.read() == "b=2"

        storage.clear()
        assert storage.text == ""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_FILE_PATH_SENTINEL = "default"
DEFAULT_AUTO_PARSE = True
DEFAULT_THROW_ON_ERROR = False


class NoteStoreSettings(BaseModel):
    """Construction options for a NoteStore.

    `file_path` may be the sentinel `"default"` (any case) to use the default note file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_path: str = DEFAULT_FILE_PATH_SENTINEL
    auto_parse: bool = DEFAULT_AUTO_PARSE
    throw_on_error: bool = DEFAULT_THROW_ON_ERROR

    @field_validator("file_path", mode="before")
    @classmethod
    def _coerce_file_path(cls, value: object) -> object:
        if value is None:
            return DEFAULT_FILE_PATH_SENTINEL

        if isinstance(value, Path):
            return str(value)

        return value

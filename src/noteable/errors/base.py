ExtraInfoType = dict[str, str | int | float | bool | None]


def render_error_message(message: str | None, extra_info: ExtraInfoType) -> str:
    """Render `message: (k: v;k: v)`, or just whichever half is present."""
    details = ";".join(f"{k}: {v}" for k, v in extra_info.items())

    if not message:
        return details

    if not details:
        return message

    return f"{message}: ({details})"


class BaseNoteableError(Exception):
    """Base exception for all noteable errors."""

    message: str | None
    extra_info: ExtraInfoType

    def __init__(self, message: str | None = None, extra_info: ExtraInfoType | None = None):
        self.message = message
        self.extra_info = extra_info or {}

        super().__init__(render_error_message(message=self.message, extra_info=self.extra_info))

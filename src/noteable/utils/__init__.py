from noteable.utils.auto_parse import auto_parse, to_raw

__all__ = ["auto_parse", "to_raw"]

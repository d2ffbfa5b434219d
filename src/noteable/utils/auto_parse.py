"""Best-guess conversion of stored text into native Python values."""

import json
import re
from typing import Any

INTEGER_PATTERN = re.compile(r"[-+]?\d+", re.ASCII)
FLOAT_PATTERN = re.compile(r"[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?", re.ASCII)

TRUE_LITERALS = frozenset({"true"})
FALSE_LITERALS = frozenset({"false"})
NULL_LITERALS = frozenset({"null", "none", "undefined"})


def auto_parse(raw: str | None) -> Any:
    """Convert `raw` into an int, float, bool, None, list or dict when it looks like one.

    Anything that does not look like one of those, including the empty string, is returned unchanged.
    """
    if raw is None:
        return None

    text = raw.strip()
    lowered = text.lower()

    if lowered in TRUE_LITERALS:
        return True

    if lowered in FALSE_LITERALS:
        return False

    if lowered in NULL_LITERALS:
        return None

    if INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # past the interpreter limit on integer string conversion
            return raw

    if FLOAT_PATTERN.fullmatch(text):
        return float(text)

    if text.startswith(("[", "{")):
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            return raw

    return raw


def to_raw(value: Any) -> str:
    """Render `value` as the text that `auto_parse` reads back to it."""
    if isinstance(value, str):
        return value

    if value is None:
        return "null"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (list, dict)):
        return json.dumps(value)

    return str(value)

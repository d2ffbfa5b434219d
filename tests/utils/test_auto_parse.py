import sys
from typing import Any

import pytest

from noteable.utils import auto_parse, to_raw


@pytest.mark.parametrize(
    argnames=("raw", "expected"),
    argvalues=[
        ("5", 5),
        ("-12", -12),
        ("+7", 7),
        ("2021", 2021),
        ("2.5", 2.5),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("true", True),
        ("TRUE", True),
        ("false", False),
        ("null", None),
        ("undefined", None),
        ("[1, 2, 3]", [1, 2, 3]),
        ('["somearr"]', ["somearr"]),
        ('{"a": 1}', {"a": 1}),
        (" 42 ", 42),
        (None, None),
    ],
)
def test_auto_parse(raw: str | None, expected: Any):
    parsed = auto_parse(raw)
    assert parsed == expected
    assert type(parsed) is type(expected)


@pytest.mark.parametrize(
    argnames=("raw"),
    argvalues=["", "hello", "hello world", "[not json", "{broken", "1.2.3", "12abc", "truthy"],
)
def test_auto_parse_passthrough(raw: str):
    assert auto_parse(raw) == raw


@pytest.mark.parametrize(
    argnames=("value", "expected"),
    argvalues=[
        ("text", "text"),
        (5, "5"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        ([1, 2], "[1, 2]"),
        ({"a": 1}, '{"a": 1}'),
    ],
)
def test_to_raw(value: Any, expected: str):
    assert to_raw(value) == expected
    assert auto_parse(to_raw(value)) == value


@pytest.mark.skipif(sys.version_info < (3, 11), reason="integer string conversion limit was added in 3.11")
def test_auto_parse_integer_past_conversion_limit():
    digits = "1" * 5000
    assert auto_parse(digits) == digits


def test_auto_parse_deeply_nested_json():
    nested = "[" * 100000
    assert auto_parse(nested) == nested


@pytest.mark.parametrize(
    argnames=("raw"),
    argvalues=["١٢", "-١٢", "١.٥", "１２"],
)
def test_auto_parse_non_ascii_digits(raw: str):
    assert auto_parse(raw) == raw

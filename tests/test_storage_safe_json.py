"""
Tests for frontkit/storage/safe_json.py
"""

import pytest

from frontkit.storage.safe_json import safe_json_parse, safe_json_stringify


@pytest.mark.parametrize(
    "value",
    [
        {"a": 1, "b": [1, 2, {"c": None}]},
        [1, "two", 3.5, True, None],
        "text with ünicode",
        0,
        None,
    ],
)
def test_stringify_then_parse_reproduces_value(value):
    text = safe_json_stringify(value)
    assert text is not None
    if value is None:
        # "null" parses back to None, which is also the failure sentinel
        assert text == "null"
    else:
        assert safe_json_parse(text) == value


def test_stringify_is_compact():
    assert safe_json_stringify({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'


def test_stringify_self_referential_returns_none():
    loop = {}
    loop["self"] = loop
    assert safe_json_stringify(loop) is None


@pytest.mark.parametrize("value", [{1, 2}, object(), float("nan"), {"x": float("inf")}])
def test_stringify_unserializable_returns_none(value):
    assert safe_json_stringify(value) is None


@pytest.mark.parametrize("text", [None, "", "{not-json}", "[1, 2", 42, b"{}"])
def test_parse_invalid_input_returns_none(text):
    assert safe_json_parse(text) is None


def test_parse_valid_json():
    assert safe_json_parse('{"a": 1}') == {"a": 1}
    assert safe_json_parse("false") is False

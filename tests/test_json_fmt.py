"""Tests for JSON pretty-printing."""

import pytest

from core.json_fmt import format_json, try_pretty_json


def test_format_json_two_space_indent():
    assert format_json('{"b":1,"a":[true,null]}') == (
        '{\n  "b": 1,\n  "a": [\n    true,\n    null\n  ]\n}'
    )


def test_format_json_keeps_non_ascii():
    assert format_json('["中文"]') == '[\n  "中文"\n]'


def test_format_json_empty_containers():
    assert format_json("{}") == "{}"
    assert format_json("[]") == "[]"


@pytest.mark.parametrize("text", ["NaN", "-Infinity", "", "{"])
def test_format_json_rejects_invalid(text):
    with pytest.raises(ValueError):
        format_json(text)


@pytest.mark.parametrize("text", ["NaN", "", "plain text", "{1: 2}"])
def test_try_pretty_json_falls_back(text):
    assert try_pretty_json(text) == text


def test_try_pretty_json_custom_indent():
    assert try_pretty_json('{"a":1}', indent=4) == '{\n    "a": 1\n}'


def test_try_pretty_json_deep_nesting_falls_back():
    """Nesting deeper than the parser can recurse is left unchanged."""
    text = "[" * 100000
    assert try_pretty_json(text) == text


def test_format_json_integral_floats_become_ints():
    assert format_json("[1.0, -0.0, 2.5, 1e2]") == "[\n  1,\n  0,\n  2.5,\n  100\n]"


def test_format_json_overflowing_number_becomes_null():
    assert format_json("[1e400]") == "[\n  null\n]"

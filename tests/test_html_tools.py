"""Tests for HTML character references and text extraction."""

import pytest

from core.html_tools import html_to_text, to_char_refs


def test_to_char_refs_leaves_letters_digits_space():
    assert to_char_refs("Abc 123") == "Abc 123"


def test_to_char_refs_escapes_everything_else():
    assert to_char_refs("a&b\n") == "a&#38;b&#10;"
    assert to_char_refs("😀") == "&#128512;"


def test_html_to_text_keeps_head_text():
    doc = "<html><head><title>T</title></head><body><b>x</b></body></html>"
    assert html_to_text(doc) == "Tx"


def test_html_to_text_resolves_named_and_numeric_entities():
    assert html_to_text("&lt;&#62;&amp;") == "<>&"


@pytest.mark.parametrize("doc", ["", "  \n", "<!-- note -->", "<!DOCTYPE html>"])
def test_html_to_text_empty_document(doc):
    """Documents with no content nodes yield empty text."""
    assert html_to_text(doc) == ""

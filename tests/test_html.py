"""Tests for HTML text extraction."""
from __future__ import annotations

import time

import pytest

from text_converter.converters.html import extract_visible_text, strip_html


@pytest.mark.parametrize(
    "markup, expected",
    [
        ("<p>Hello <b>World</b></p>", "Hello World"),
        ("<p>A</p>\n\n\n\n<p>B</p>", "A\n\nB"),
        ("<p>A</p>\n<p>B</p>", "A\nB"),
        ("Fish &amp; Chips &lt;3", "Fish & Chips <3"),
        ("<div>  lots   of\t\tspace  </div>", "lots of space"),
        ("<p>line one   \n   line two</p>", "line one\nline two"),
        ("<a href=\"https://example.com\" title=\"x\">link</a>", "link"),
        ("<!-- hidden comment --><span>shown</span>", "shown"),
        ("", ""),
        ("plain text", "plain text"),
    ],
)
def test_strip_html(markup: str, expected: str) -> None:
    assert strip_html(markup) == expected


def test_strip_html_skips_script_and_style() -> None:
    markup = "<script>alert('x')</script><p>Visible</p><style>p { color: red; }</style>"
    assert strip_html(markup) == "Visible"


@pytest.mark.parametrize(
    "markup, expected",
    [
        ("<div><p>unclosed <b>bold", "unclosed bold"),
        ("a < b and c > d", "a < b and c > d"),
        ("</p>stray end tag", "stray end tag"),
    ],
)
def test_strip_html_tolerates_malformed_markup(markup: str, expected: str) -> None:
    assert strip_html(markup) == expected


def test_extract_visible_text_keeps_whitespace() -> None:
    assert extract_visible_text("<p> a </p>\n\n\n<p>\tb</p>") == " a \n\n\n\tb"


def test_strip_html_handles_large_input() -> None:
    markup = "<p>word <i>and</i>\t\tmore</p>\n\n\n" * 50_000
    result = strip_html(markup)
    assert result.startswith("word and more\n\nword")
    assert "\n\n\n" not in result


@pytest.mark.parametrize(
    "markup, expected",
    [
        ("<a title=\"x > y\">quoted</a>", "quoted"),
        ("<SCRIPT type=\"text/javascript\">var a = 1;</SCRIPT>after", "after"),
        ("<!DOCTYPE html><p>doc</p>", "doc"),
        ("before<!-- unterminated comment <p>hidden</p>", "before"),
        ("before<script>never closed", "before"),
        ("<a <b text", "<a <b text"),
    ],
)
def test_extract_visible_text_edge_cases(markup: str, expected: str) -> None:
    assert extract_visible_text(markup) == expected


def test_long_space_run_is_linear() -> None:
    text = "a" + " " * 1_000_000 + "b"
    started = time.perf_counter()
    assert strip_html(text) == "a b"
    assert time.perf_counter() - started < 5


def test_unterminated_start_tags_are_linear() -> None:
    markup = "<a " * 100_000
    started = time.perf_counter()
    assert extract_visible_text(markup) == markup
    assert strip_html(markup) == markup.strip()
    assert time.perf_counter() - started < 5


def test_unterminated_quoted_attributes_are_linear() -> None:
    markup = "<a x=\"" * 50_000 + "text"
    started = time.perf_counter()
    assert strip_html(markup).endswith("text")
    assert time.perf_counter() - started < 5

"""Tests for slug and case conversion helpers."""
from __future__ import annotations

import re

import pytest

from text_converter.utils import capitalize, slugify, to_lower_case, to_snake_case, to_upper_case

SAMPLES = [
    "",
    "Hello, World!",
    "  multiple   spaces  ",
    "--Already--Slugged--",
    "Café au lait: 3 €",
    "tabs\tand\nnewlines",
    "snake_case stays",
    "!!! ??? ...",
    "myVariableName",
    "Straße ÄÖÜ",
    "x" * 1000 + " - " + "Y" * 1000,
]

_SLUG = re.compile(r"^[a-z0-9_]+(?:-[a-z0-9_]+)*$")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("Hello, World!", "hello-world"),
        ("  multiple   spaces  ", "multiple-spaces"),
        ("--Already--Slugged--", "already-slugged"),
        ("Café au lait", "caf-au-lait"),
        ("snake_case stays", "snake_case-stays"),
        ("!!!", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_slugify_output_is_url_safe(text: str) -> None:
    slug = slugify(text)
    assert slug == "" or _SLUG.match(slug)
    assert "--" not in slug
    assert not slug.startswith("-") and not slug.endswith("-")


def test_slugify_coerces_non_strings() -> None:
    assert slugify(2024) == "2024"
    assert slugify(None) == "none"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("myVariableName", "my_variable_name"),
        ("Hello World!", "hello_world"),
        ("", ""),
        ("  already_snake  ", "already_snake"),
        ("kebab-case-name", "kebab_case_name"),
        ("HTTPServer", "h_t_t_p_server"),
        ("Convert THIS text", "convert_t_h_i_s_text"),
        ("...", ""),
    ],
)
def test_to_snake_case(text: str, expected: str) -> None:
    assert to_snake_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("", ""),
        ("hELLO wORLD", "Hello World"),
        ("  double  space ", "  Double  Space "),
        ("hello\tworld", "Hello\tworld"),
        ("line one\nline two", "Line One\nline Two"),
    ],
)
def test_capitalize(text: str, expected: str) -> None:
    assert capitalize(text) == expected


@pytest.mark.parametrize("text", [s for s in SAMPLES if "\t" not in s and "\n" not in s])
def test_capitalize_is_idempotent(text: str) -> None:
    assert capitalize(capitalize(text)) == capitalize(text)


def test_case_folding() -> None:
    assert to_upper_case("Hello World") == "HELLO WORLD"
    assert to_lower_case("Hello World") == "hello world"
    assert to_upper_case("straße") == "STRASSE"
    assert to_lower_case(42) == "42"


@pytest.mark.parametrize("text", SAMPLES)
def test_case_folding_is_idempotent(text: str) -> None:
    assert to_upper_case(to_upper_case(text)) == to_upper_case(text)
    assert to_lower_case(to_lower_case(text)) == to_lower_case(text)


def test_transforms_handle_large_input() -> None:
    text = "Some Mixed-case Input, with punctuation!\t" * 50_000
    for transform in (slugify, to_snake_case, capitalize, to_upper_case, to_lower_case):
        assert isinstance(transform(text), str)

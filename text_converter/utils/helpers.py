"""Utility functions for slug and case conversion."""

import re
from typing import Any, List

# Word characters are ASCII only so that slugs stay URL safe.
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_MULTIPLE_HYPHENS = re.compile(r"-{2,}")
_NON_WORD_RUNS = re.compile(r"[^A-Za-z0-9_]+")


def slugify(text: Any) -> str:
    """
    Convert text to URL-friendly slug.

    Args:
        text: Text to slugify

    Returns:
        Lowercase, hyphen-delimited slug (may be empty)
    """
    text = str(text).lower().strip()
    text = _NON_SLUG_CHARS.sub("", text)
    text = _WHITESPACE.sub("-", text)
    text = _MULTIPLE_HYPHENS.sub("-", text)
    return text.strip("-")


def _split_words(text: str) -> List[str]:
    """Split on spaces and before every capital letter that follows a word character.

    Chunks only hold word characters at this point, so any capital past
    position 0 starts a new token.
    """
    tokens: List[str] = []
    for chunk in text.split(" "):
        start = 0
        for index in range(1, len(chunk)):
            if "A" <= chunk[index] <= "Z":
                tokens.append(chunk[start:index])
                start = index
        tokens.append(chunk[start:])
    return tokens


def to_snake_case(text: Any) -> str:
    """
    Convert text to snake_case format.

    Args:
        text: Text to convert, e.g. "myVariableName" or "Hello World!"

    Returns:
        snake_case text, e.g. "my_variable_name" or "hello_world"
    """
    text = str(text).strip()
    text = _NON_WORD_RUNS.sub(" ", text)
    words = [word.lower() for word in _split_words(text)]
    return "_".join(word for word in words if word)


def capitalize(text: Any) -> str:
    """
    Capitalize Each Word In Text.

    Only the literal space character separates words; tabs and newlines
    stay inside the surrounding word.

    Args:
        text: Text to capitalize

    Returns:
        Text with the first character of every word uppercased
    """
    words = str(text).lower().split(" ")
    return " ".join(word[0].upper() + word[1:] if word else word for word in words)


def to_upper_case(text: Any) -> str:
    """Convert text to UPPERCASE."""
    return str(text).upper()


def to_lower_case(text: Any) -> str:
    """Convert text to lowercase."""
    return str(text).lower()

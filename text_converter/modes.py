"""Conversion mode table driving the mode selector.

`CONVERSION_MODES` is read-only and keeps declaration order, which is the
order the selector lists the modes in.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from .schemas.mode import ConversionMode


class UnknownModeError(KeyError):
    """Raised when a conversion mode key is not in the table."""

    def __init__(self, mode: str):
        super().__init__(mode)
        self.mode = mode

    def __str__(self) -> str:
        return f"Unknown conversion mode: '{self.mode}'"


CONVERSION_MODES: Mapping[str, ConversionMode] = MappingProxyType({
    "markdown-to-text": ConversionMode(
        label="Markdown → Text",
        description="Convert Markdown to clean plain text",
        input_label="Markdown",
        output_label="Plain Text",
        input_placeholder="Paste your Markdown, notes, or AI-generated text here...",
        output_placeholder="Your clean, plain text will appear here.",
        bidirectional=True,
    ),
    "text-to-markdown": ConversionMode(
        label="Text → Markdown",
        description="Convert plain text to formatted Markdown",
        input_label="Plain Text",
        output_label="Markdown",
        input_placeholder="Type or paste your text here...",
        output_placeholder="Generated Markdown will appear here...",
        bidirectional=True,
    ),
    "slugify": ConversionMode(
        label="Slugify",
        description="Convert text to URL-friendly slugs",
        input_label="Text",
        output_label="URL Slug",
        input_placeholder="Enter text to convert to URL slug...",
        output_placeholder="url-friendly-slug-will-appear-here",
        bidirectional=False,
    ),
    "snake-case": ConversionMode(
        label="Snake Case",
        description="Convert text to snake_case format",
        input_label="Text",
        output_label="Snake Case",
        input_placeholder="Enter text to convert to snake_case...",
        output_placeholder="snake_case_text_will_appear_here",
        bidirectional=False,
    ),
    "capitalize": ConversionMode(
        label="Capitalize",
        description="Capitalize Each Word In Text",
        input_label="Text",
        output_label="Capitalized Text",
        input_placeholder="enter text to capitalize each word...",
        output_placeholder="Capitalized Text Will Appear Here",
        bidirectional=False,
    ),
    "uppercase": ConversionMode(
        label="UPPERCASE",
        description="Convert text to UPPERCASE",
        input_label="Text",
        output_label="UPPERCASE",
        input_placeholder="enter text to convert to uppercase...",
        output_placeholder="UPPERCASE TEXT WILL APPEAR HERE",
        bidirectional=False,
    ),
    "lowercase": ConversionMode(
        label="lowercase",
        description="convert text to lowercase",
        input_label="Text",
        output_label="lowercase",
        input_placeholder="ENTER TEXT TO CONVERT TO LOWERCASE...",
        output_placeholder="lowercase text will appear here",
        bidirectional=False,
    ),
    "strip-html": ConversionMode(
        label="Strip HTML",
        description="Remove HTML tags and extract clean text",
        input_label="HTML",
        output_label="Clean Text",
        input_placeholder="Paste HTML content to strip tags...",
        output_placeholder="Clean text without HTML tags will appear here",
        bidirectional=False,
    ),
})


def list_modes() -> List[str]:
    """Return all mode keys in declaration order."""
    return list(CONVERSION_MODES)


def get_mode(mode: str) -> Optional[ConversionMode]:
    """
    Look up a conversion mode.

    Args:
        mode: Mode key, e.g. "slugify"

    Returns:
        The mode descriptor, or None for unknown keys
    """
    return CONVERSION_MODES.get(mode)


def require_mode(mode: str) -> ConversionMode:
    """
    Look up a conversion mode that must exist.

    Args:
        mode: Mode key

    Returns:
        The mode descriptor

    Raises:
        UnknownModeError: If the key is not in the table
    """
    descriptor = get_mode(mode)
    if descriptor is None:
        raise UnknownModeError(mode)
    return descriptor


def is_bidirectional(mode: str) -> bool:
    """
    Check whether a conversion mode offers the inverse conversion.

    Args:
        mode: Mode key

    Returns:
        True for bidirectional modes, False for one-way and unknown keys
    """
    descriptor = get_mode(mode)
    return descriptor is not None and descriptor.bidirectional

"""Lightweight Markdown <-> plain text conversion.

These are line-oriented regex rewrites covering the common inline and block
syntax found in notes and AI-generated text. They do not implement a full
Markdown grammar.
"""

import re
from typing import Any, List, Optional, Tuple

# Block syntax
_FENCE = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
_HORIZONTAL_RULE = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE)
_HEADING = re.compile(r"[ \t]{0,3}#{1,6}(?:[ \t]+|$)")
_SETEXT_UNDERLINE = re.compile(r"^[ \t]*(?:=+|-+)[ \t]*$\n?", re.MULTILINE)
_BLOCKQUOTE = re.compile(r"^[ \t]*(?:>[ \t]?)+", re.MULTILINE)
_REFERENCE_DEFINITION = re.compile(r"^[ \t]*\[[^\]\n]+\]:[ \t]*\S+.*$\n?", re.MULTILINE)
_BULLET = re.compile(r"^([ \t]*)[*+-][ \t]+", re.MULTILINE)

# Inline syntax. Bodies exclude their own delimiters so an unclosed marker
# stops scanning at the next delimiter instead of the end of the line.
_IMAGE = re.compile(r"!\[([^\[\]\n]*)\]\([^()\n]*\)")
_LINK = re.compile(r"\[([^\[\]\n]+)\]\([^()\n]*\)")
_REFERENCE_LINK = re.compile(r"\[([^\[\]\n]+)\]\[[^\[\]\n]*\]")
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_STRONG_STAR = re.compile(r"\*\*(?=\S)([^*\n]+?)(?<=\S)\*\*")
_STRONG_UNDERSCORE = re.compile(r"__(?=\S)([^_\n]+?)(?<=\S)__")
_STRIKE = re.compile(r"~~(?=\S)([^~\n]+?)(?<=\S)~~")
_EMPHASIS_STAR = re.compile(r"(?<![\w*])\*(?=\S)([^*\n]+?)(?<=\S)\*(?!\*)")
_EMPHASIS_UNDERSCORE = re.compile(r"(?<![\w_])_(?=\S)([^_\n]+?)(?<=\S)_(?![\w_])")

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")
_BULLET_LINE = re.compile(r"^[*+\-•‣◦⁃][ \t]+(.*)$")
_NUMBERED_LINE = re.compile(r"^(\d+)[.)][ \t]+(.*)$")

_MAX_HEADING_LENGTH = 80


def _strip_heading(line: str) -> str:
    """Drop ATX heading markers, including an optional closing run of '#'."""
    opening = _HEADING.match(line)
    if not opening:
        return line
    title = line[opening.end():].rstrip()
    closed = title.rstrip("#")
    if closed != title and (not closed or closed[-1] in " \t"):
        title = closed.rstrip()
    return title


def _rewrite_prose(text: str) -> List[str]:
    """Remove Markdown syntax from text outside fenced code blocks."""
    # Block level
    text = _HORIZONTAL_RULE.sub("", text)
    text = _SETEXT_UNDERLINE.sub("", text)
    text = "\n".join(_strip_heading(line) for line in text.split("\n"))
    text = _BLOCKQUOTE.sub("", text)
    text = _REFERENCE_DEFINITION.sub("", text)
    text = _BULLET.sub(r"\1- ", text)

    # Inline
    text = _IMAGE.sub(r"\1", text)
    text = _LINK.sub(r"\1", text)
    text = _REFERENCE_LINK.sub(r"\1", text)
    text = _INLINE_CODE.sub(r"\1", text)
    text = _STRONG_STAR.sub(r"\1", text)
    text = _STRONG_UNDERSCORE.sub(r"\1", text)
    text = _STRIKE.sub(r"\1", text)
    text = _EMPHASIS_STAR.sub(r"\1", text)
    text = _EMPHASIS_UNDERSCORE.sub(r"\1", text)
    return text.split("\n")


def _closes_fence(marker: "re.Match[str]", fence: str) -> bool:
    run = marker.group(1)
    return run[0] == fence[0] and len(run) >= len(fence) and not marker.group(2).strip()


def _split_fences(markdown: str) -> List[Tuple[bool, List[str]]]:
    """Split lines into (is_code, lines) runs; fence marker lines are dropped.

    An unclosed fence runs to the end of the input.
    """
    runs: List[Tuple[bool, List[str]]] = []
    current: List[str] = []
    fence: Optional[str] = None
    for line in markdown.split("\n"):
        marker = _FENCE.match(line)
        if fence is None and marker:
            runs.append((False, current))
            current = []
            fence = marker.group(1)
        elif fence is not None and marker and _closes_fence(marker, fence):
            runs.append((True, current))
            current = []
            fence = None
        else:
            current.append(line)
    runs.append((fence is not None, current))
    return runs


def markdown_to_text(markdown: Any) -> str:
    """
    Convert Markdown to clean plain text.

    Fenced code blocks keep their content unchanged; only the fence lines
    are removed.

    Args:
        markdown: Markdown text

    Returns:
        Plain text with formatting markers removed
    """
    output: List[str] = []
    blank_lines = 0
    for is_code, lines in _split_fences(str(markdown).replace("\r\n", "\n")):
        if is_code:
            output.extend(lines)
            blank_lines = 0
            continue
        if not lines:
            continue
        for line in _rewrite_prose("\n".join(lines)):
            line = line.rstrip()
            blank_lines = blank_lines + 1 if not line else 0
            # At most one blank line between prose blocks
            if blank_lines < 2:
                output.append(line)
    return "\n".join(output).strip("\n")


def _heading_text(line: str) -> Optional[str]:
    """Return heading text if a lone line reads like a title."""
    if len(line) > _MAX_HEADING_LENGTH:
        return None
    if line.endswith(":") and len(line) > 1:
        return line[:-1].rstrip()
    if line.isupper():
        return line
    return None


def _convert_block(lines: List[str]) -> str:
    if len(lines) == 1 and not _BULLET_LINE.match(lines[0]) and not _NUMBERED_LINE.match(lines[0]):
        heading = _heading_text(lines[0])
        if heading:
            return f"## {heading}"

    output: List[str] = []
    paragraph: List[str] = []
    for line in lines:
        bullet = _BULLET_LINE.match(line)
        numbered = _NUMBERED_LINE.match(line)
        if not bullet and not numbered:
            paragraph.append(line)
            continue
        if paragraph:
            output.append(" ".join(paragraph))
            paragraph = []
        if bullet:
            output.append(f"- {bullet.group(1)}")
        else:
            output.append(f"{numbered.group(1)}. {numbered.group(2)}")
    if paragraph:
        output.append(" ".join(paragraph))
    return "\n".join(output)


def text_to_markdown(text: Any) -> str:
    """
    Convert plain text to formatted Markdown.

    Blank lines separate blocks. A block made of a single short line that
    ends with a colon or is written in capitals becomes a heading, bullet
    and numbered lines become list items and everything else is joined
    into paragraphs.

    Args:
        text: Plain text

    Returns:
        Markdown text
    """
    text = str(text).replace("\r\n", "\n").strip()
    blocks = []
    for block in _PARAGRAPH_BREAK.split(text):
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if lines:
            blocks.append(_convert_block(lines))
    return "\n\n".join(blocks)

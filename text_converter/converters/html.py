"""HTML to plain text extraction."""

import re
from html import unescape
from typing import Any, List

# One alternative per markup construct. Bodies never cross a '<' (except
# comments and script/style text, which run to their terminator or the end
# of input), so a failed match stops at the next tag and every character is
# scanned a bounded number of times.
_MARKUP = re.compile(
    r"""
    <!--.*?(?:-->|\Z)
    | <(?P<hidden>script|style)\b[^<>]*>.*?(?:</(?P=hidden)\s*>|\Z)
    | </?[A-Za-z][^<>"']*(?:(?:"[^"<]*"|'[^'<]*')[^<>"']*)*>
    | <[!?][^<>]*>
    """,
    re.IGNORECASE | re.DOTALL | re.VERBOSE,
)
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_TABS = re.compile(r"\t+")
_MULTIPLE_SPACES = re.compile(r" {2,}")


def extract_visible_text(html: Any) -> str:
    """
    Extract the text content of an HTML fragment.

    Tags, attributes and comments are dropped, character references are
    decoded and script/style bodies are skipped. A '<' that does not open a
    complete tag is kept as literal text, and an unterminated comment or
    script/style element runs to the end of the input.

    Args:
        html: HTML fragment

    Returns:
        Concatenated text nodes, whitespace untouched
    """
    html = str(html)
    chunks: List[str] = []
    position = 0
    for markup in _MARKUP.finditer(html):
        if markup.start() > position:
            chunks.append(unescape(html[position:markup.start()]))
        position = markup.end()
    chunks.append(unescape(html[position:]))
    return "".join(chunks)


def strip_html(html: Any) -> str:
    """
    Strip HTML tags from text and normalize the remaining whitespace.

    Args:
        html: Text with HTML tags

    Returns:
        Plain text with at most one blank line between blocks
    """
    text = extract_visible_text(html)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    text = text.strip()
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _TABS.sub(" ", text)
    text = _MULTIPLE_SPACES.sub(" ", text)
    return text

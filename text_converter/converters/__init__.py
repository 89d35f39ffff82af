"""Converter modules and the mode dispatcher."""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from ..modes import require_mode
from ..schemas.request import ConversionRequest
from ..schemas.result import ConversionResult
from ..utils.helpers import capitalize, slugify, to_lower_case, to_snake_case, to_upper_case
from .html import extract_visible_text, strip_html
from .markdown import markdown_to_text, text_to_markdown

logger = logging.getLogger(__name__)

Transform = Callable[[Any], str]

# mode key -> (forward transform, inverse transform or None)
TRANSFORMS: Dict[str, Tuple[Transform, Optional[Transform]]] = {
    "markdown-to-text": (markdown_to_text, text_to_markdown),
    "text-to-markdown": (text_to_markdown, markdown_to_text),
    "slugify": (slugify, None),
    "snake-case": (to_snake_case, None),
    "capitalize": (capitalize, None),
    "uppercase": (to_upper_case, None),
    "lowercase": (to_lower_case, None),
    "strip-html": (strip_html, None),
}


def convert(mode: str, text: Any, reverse: bool = False) -> str:
    """
    Apply the transform registered for a conversion mode.

    Args:
        mode: Mode key from CONVERSION_MODES
        text: Text to convert
        reverse: Apply the inverse transform of a bidirectional mode

    Returns:
        Converted text

    Raises:
        UnknownModeError: If the mode key is unknown
        ValueError: If reverse is requested for a one-way mode
    """
    descriptor = require_mode(mode)
    forward, inverse = TRANSFORMS[mode]
    if reverse:
        if not descriptor.bidirectional or inverse is None:
            raise ValueError(f"Conversion mode '{mode}' is one-way and has no inverse")
        logger.debug("Converting with inverse of mode %s", mode)
        return inverse(text)
    logger.debug("Converting with mode %s", mode)
    return forward(text)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """
    Run a conversion request.

    Args:
        request: Validated conversion request

    Returns:
        Conversion result with input and output text
    """
    output = convert(request.mode, request.text, reverse=request.reverse)
    return ConversionResult(mode=request.mode, reverse=request.reverse, input=request.text, output=output)


__all__ = [
    "TRANSFORMS",
    "convert",
    "convert_request",
    "extract_visible_text",
    "strip_html",
    "markdown_to_text",
    "text_to_markdown",
]

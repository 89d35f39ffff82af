"""Text conversion utilities and the conversion mode table."""

from .converters import convert, convert_request, extract_visible_text, markdown_to_text, strip_html, text_to_markdown
from .modes import CONVERSION_MODES, UnknownModeError, get_mode, is_bidirectional, list_modes, require_mode
from .schemas import ConversionMode, ConversionRequest, ConversionResult
from .utils import capitalize, slugify, to_lower_case, to_snake_case, to_upper_case

__all__ = [
    "CONVERSION_MODES",
    "ConversionMode",
    "ConversionRequest",
    "ConversionResult",
    "UnknownModeError",
    "capitalize",
    "convert",
    "convert_request",
    "extract_visible_text",
    "get_mode",
    "is_bidirectional",
    "list_modes",
    "markdown_to_text",
    "require_mode",
    "slugify",
    "strip_html",
    "text_to_markdown",
    "to_lower_case",
    "to_snake_case",
    "to_upper_case",
]

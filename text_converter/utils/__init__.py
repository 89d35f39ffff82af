"""Utility modules."""

from .helpers import (
    slugify,
    to_snake_case,
    capitalize,
    to_upper_case,
    to_lower_case,
)

__all__ = [
    "slugify",
    "to_snake_case",
    "capitalize",
    "to_upper_case",
    "to_lower_case",
]

"""Schema definitions for modes, requests and results."""

from .mode import ConversionMode
from .request import ConversionRequest
from .result import ConversionResult

__all__ = ["ConversionMode", "ConversionRequest", "ConversionResult"]

"""Configuration management for text conversion."""

import logging
import os

from .modes import get_mode

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_OUTPUT_FORMATS = ("text", "json")


class Config:
    """Configuration manager for the text converter CLI."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Conversion defaults
        self.default_mode: str = os.environ.get("TEXT_CONVERTER_DEFAULT_MODE", "markdown-to-text")

        # Output configuration
        self.output_format: str = os.environ.get("TEXT_CONVERTER_OUTPUT_FORMAT", "text").lower()

        # Logging configuration
        self.log_level: str = os.environ.get("TEXT_CONVERTER_LOG_LEVEL", "WARNING").upper()

    def validate(self) -> bool:
        """
        Validate that configuration values are usable.

        Returns:
            True if configuration is valid
        """
        if get_mode(self.default_mode) is None:
            return False
        if self.output_format not in _OUTPUT_FORMATS:
            return False
        if self.log_level not in _LOG_LEVELS:
            return False
        return True

    def get_log_level(self) -> int:
        """
        Get the numeric logging level.

        Returns:
            Logging level, WARNING if the configured name is unknown
        """
        if self.log_level not in _LOG_LEVELS:
            return logging.WARNING
        return getattr(logging, self.log_level)

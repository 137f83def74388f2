"""Crosscutting: configuración, logging y excepciones."""

from .config import Settings, get_settings
from .exceptions import (
    HighlightError,
    InvalidPatternError,
    InvalidRangeError,
)
from .logger import JSONFormatter, logger, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "HighlightError",
    "InvalidPatternError",
    "InvalidRangeError",
    "JSONFormatter",
    "logger",
    "setup_logger",
]

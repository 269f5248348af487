"""Core utilities for sift: options, errors and logging."""

from sift.core.config import FilterOptions, TrimMode
from sift.core.errors import SiftError, UnsupportedOperator
from sift.core.logging import Logger, color_palette, log

__all__ = [
    "FilterOptions",
    "TrimMode",
    "SiftError",
    "UnsupportedOperator",
    "Logger",
    "log",
    "color_palette",
]

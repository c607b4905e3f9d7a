"""Utility modules for textbuffer.

Provides:
- logger: get_logger for logging
"""

from textbuffer.utils.logger import get_logger

__all__ = [
    "get_logger",
]

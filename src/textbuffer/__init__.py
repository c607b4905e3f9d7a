"""
textbuffer — chainable mutable text buffers for Python

Build strings without piling up intermediate copies. Every mutator edits the
buffer in place and returns it, so calls chain.

Quick Start:
    >>> from textbuffer import small
    >>> small().append("  hi ").append(20).append("  ").trim().to_text()
    'hi 20'

    >>> # Reuse one buffer across calls (single-threaded code only)
    >>> from textbuffer import shared
    >>> shared().append("user-").append(42).to_text()
    'user-42'

Accessors:
    create(capacity)           New buffer with an explicit capacity
    small() / medium() / large()  New buffer with a preset capacity
    shared()                   Process-wide buffer, reset on each call
    local()                    Per-thread buffer, reset on each call
"""

from textbuffer.buffer import MutableTextBuffer, format_value
from textbuffer.config import (
    BufferConfig,
    buffer_config_context,
    get_buffer_config,
    reset_buffer_config,
    set_buffer_config,
)
from textbuffer.errors import BufferRangeError, TextBufferError
from textbuffer.pool import create, large, local, medium, shared, small

__version__ = "0.1.0"

__all__ = [
    "BufferConfig",
    "BufferRangeError",
    "MutableTextBuffer",
    "TextBufferError",
    "__version__",
    "buffer_config_context",
    "create",
    "format_value",
    "get_buffer_config",
    "large",
    "local",
    "medium",
    "reset_buffer_config",
    "set_buffer_config",
    "shared",
    "small",
]

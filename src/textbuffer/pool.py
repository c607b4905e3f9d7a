"""Buffer accessors: fresh presets, the shared instance and per-thread reuse.

Three ways to get a MutableTextBuffer:

- ``create(capacity)``, ``small()``, ``medium()``, ``large()`` return a new,
  independently owned buffer every call. Safe from any thread.
- ``shared()`` returns one process-wide buffer, reset to empty on each call.
  No locking: two threads using it at once corrupt each other's content.
  Only use it from single-threaded code, and finish with the result before
  calling ``shared()`` again.
- ``local()`` behaves like ``shared()`` but keeps one buffer per thread.

Example:
    >>> from textbuffer import shared
    >>> shared().append("aaa").append(20).append("bbbb").to_text()
    'aaa20bbbb'
    >>> shared().append("b").to_text()
    'b'
"""

from __future__ import annotations

import threading

from textbuffer.buffer import MutableTextBuffer
from textbuffer.config import get_buffer_config
from textbuffer.utils.logger import get_logger

logger = get_logger(__name__)

# Allocated on first shared() call, never freed
_shared_buffer: MutableTextBuffer | None = None

_thread_local = threading.local()


def create(capacity: int) -> MutableTextBuffer:
    """Return a new buffer pre-sized to ``capacity``.

    Raises:
        BufferRangeError: If capacity is negative
    """
    return MutableTextBuffer(capacity)


def small() -> MutableTextBuffer:
    """Return a new buffer with the small preset capacity (64 by default)."""
    return create(get_buffer_config().small_capacity)


def medium() -> MutableTextBuffer:
    """Return a new buffer with the medium preset capacity (256 by default)."""
    return create(get_buffer_config().medium_capacity)


def large() -> MutableTextBuffer:
    """Return a new buffer with the large preset capacity (1024 by default)."""
    return create(get_buffer_config().large_capacity)


def shared() -> MutableTextBuffer:
    """Return the process-wide buffer, emptied.

    Prior content is discarded; storage and capacity are kept for reuse.

    Warning:
        Not thread safe. Use local() or a preset when more than one thread
        builds text.
    """
    global _shared_buffer
    buffer = _shared_buffer
    if buffer is None:
        capacity = get_buffer_config().shared_capacity
        buffer = _shared_buffer = MutableTextBuffer(capacity)
        logger.debug("Allocated shared buffer with capacity %d", capacity)
    buffer.length = 0
    return buffer


def local() -> MutableTextBuffer:
    """Return this thread's reusable buffer, emptied.

    Each thread gets its own instance, allocated on first use with the
    shared preset capacity.
    """
    buffer: MutableTextBuffer | None = getattr(_thread_local, "buffer", None)
    if buffer is None:
        capacity = get_buffer_config().shared_capacity
        buffer = _thread_local.buffer = MutableTextBuffer(capacity)
        logger.debug(
            "Allocated buffer for thread %s with capacity %d",
            threading.current_thread().name,
            capacity,
        )
    buffer.length = 0
    return buffer


__all__ = [
    "create",
    "large",
    "local",
    "medium",
    "shared",
    "small",
]

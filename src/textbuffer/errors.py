"""Exception classes for textbuffer.

Provides standardized exceptions for error handling throughout textbuffer.
"""

from __future__ import annotations


class TextBufferError(Exception):
    """Base exception for all textbuffer errors.
    
    Subclass this for specific error categories.
    """

    pass


class BufferRangeError(TextBufferError, IndexError):
    """Index, length or capacity outside the current buffer bounds.
    
    Raised by remove(), the length/capacity setters and create() with a
    negative capacity. Also an IndexError, so code that handles sequence
    range errors catches it unchanged.
    """

    def __init__(
        self,
        message: str,
        start_index: int | None = None,
        length: int | None = None,
        size: int | None = None,
    ) -> None:
        """Initialize range error with the offending bounds.
        
        Args:
            message: Error description
            start_index: Requested start index (optional)
            length: Requested length or capacity (optional)
            size: Buffer length at the time of the call (optional)
        """
        self.message = message
        self.start_index = start_index
        self.length = length
        self.size = size

        details = []
        if start_index is not None:
            details.append(f"start_index={start_index}")
        if length is not None:
            details.append(f"length={length}")
        if size is not None:
            details.append(f"size={size}")
        suffix = f" ({', '.join(details)})" if details else ""

        super().__init__(f"{message}{suffix}")

"""MutableTextBuffer for chainable in-place text building.

Appends to a list of fragments and joins lazily: O(n) total vs O(n²) for
repeated string concatenation. Operations that need indexed access (remove,
replace, trim, case conversion) collapse the fragments into one string first,
so a run of appends followed by a single edit costs one join.

Every mutator returns the buffer itself, so calls chain:

    >>> MutableTextBuffer(8).append("aaa").append(20).append("bbbb").to_text()
    'aaa20bbbb'

Thread Safety:
    No internal locking. A buffer must only be mutated by one thread at a
    time; see textbuffer.pool for the shared and per-thread accessors.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from textbuffer.config import get_buffer_config
from textbuffer.errors import BufferRangeError
from textbuffer.utils.logger import get_logger

logger = get_logger(__name__)

# Starting capacity when none is given
DEFAULT_CAPACITY = 16


class MutableTextBuffer:
    """Growable character buffer with chainable mutators.

    Tracks a logical length and a capacity. The capacity doubles (or jumps
    straight to the required size) whenever content outgrows it, so
    ``len(buffer) <= buffer.capacity`` always holds.

    Usage:
            >>> buf = MutableTextBuffer(64).append("  Hello ").append(True).append("  ")
            >>> buf.trim().to_upper().to_text()
            'HELLO TRUE'

    """

    __slots__ = ("_capacity", "_length", "_parts")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Initialize an empty buffer pre-sized to ``capacity``.

        Raises:
            BufferRangeError: If capacity is negative
        """
        if capacity < 0:
            raise BufferRangeError("capacity must not be negative", length=capacity)
        self._parts: list[str] = []
        self._length = 0
        self._capacity = capacity

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Number of characters currently held."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        # Shrinking only: growing would have to invent padding characters.
        if value < 0 or value > self._length:
            raise BufferRangeError(
                "length can only be reduced", length=value, size=self._length
            )
        if value == 0:
            self._parts = []
            self._length = 0
        elif value < self._length:
            self._store(self._collapse()[:value])

    @property
    def capacity(self) -> int:
        """Pre-allocated storage size, never below ``length``."""
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < self._length:
            raise BufferRangeError(
                "capacity must not be less than the current length",
                length=value,
                size=self._length,
            )
        self._capacity = value

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def append(self, value: AppendValue) -> MutableTextBuffer:
        """Append the text form of a value.

        Args:
            value: str (character or string), bool, int, float, a sequence
                of characters, or another MutableTextBuffer

        Returns:
            self for method chaining

        Raises:
            TypeError: If the value has no text form defined here
        """
        text = format_value(value)
        if text:
            self._parts.append(text)
            self._length += len(text)
            self._grow(self._length)
        return self

    def remove(self, start_index: int, length: int) -> MutableTextBuffer:
        """Delete ``length`` characters starting at ``start_index``.

        Raises:
            BufferRangeError: If the range is not inside the current content
        """
        size = self._length
        if start_index < 0 or length < 0 or start_index > size - length:
            raise BufferRangeError(
                "index and length must refer to a location within the buffer",
                start_index=start_index,
                length=length,
                size=size,
            )
        if length:
            text = self._collapse()
            self._store(text[:start_index] + text[start_index + length :])
        return self

    def replace(self, old_text: str, new_text: str) -> MutableTextBuffer:
        """Replace every non-overlapping occurrence, scanning left to right.

        Raises:
            ValueError: If old_text is empty
        """
        if not old_text:
            raise ValueError("old_text must not be empty")
        text = self._collapse()
        if old_text in text:
            self._store(text.replace(old_text, new_text))
        return self

    def to_lower(self) -> MutableTextBuffer:
        """Lowercase every uppercase character in place."""
        return self._convert_case(str.isupper, str.lower)

    def to_upper(self) -> MutableTextBuffer:
        """Uppercase every lowercase character in place."""
        return self._convert_case(str.islower, str.upper)

    def trim(self) -> MutableTextBuffer:
        """Strip whitespace from both ends."""
        return self.trim_end().trim_start()

    def trim_start(self) -> MutableTextBuffer:
        """Strip leading whitespace. All-whitespace content is cleared."""
        text = self._collapse()
        for i, ch in enumerate(text):
            if not ch.isspace():
                if i > 0:
                    self._store(text[i:])
                return self
        if text:
            self._store("")
        return self

    def trim_end(self) -> MutableTextBuffer:
        """Strip trailing whitespace. All-whitespace content is cleared."""
        text = self._collapse()
        for i in range(len(text) - 1, -1, -1):
            if not text[i].isspace():
                if i < len(text) - 1:
                    self._store(text[: i + 1])
                return self
        if text:
            self._store("")
        return self

    def clear(self) -> MutableTextBuffer:
        """Discard all content.

        Drops the buffer to a fresh zero-capacity store unless the active
        BufferConfig has ``retain_capacity_on_clear`` set.

        Returns:
            self for method chaining
        """
        self._parts = []
        self._length = 0
        if not get_buffer_config().retain_capacity_on_clear and self._capacity:
            logger.debug("clear() released capacity %d", self._capacity)
            self._capacity = 0
        return self

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """Return the current content as an immutable string."""
        return self._collapse()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _collapse(self) -> str:
        parts = self._parts
        if not parts:
            return ""
        if len(parts) > 1:
            self._parts = parts = ["".join(parts)]
        return parts[0]

    def _store(self, text: str) -> None:
        self._parts = [text] if text else []
        self._length = len(text)
        self._grow(self._length)

    def _grow(self, required: int) -> None:
        if required > self._capacity:
            new_capacity = max(self._capacity * 2, required)
            logger.debug("Growing capacity %d -> %d", self._capacity, new_capacity)
            self._capacity = new_capacity

    def _convert_case(
        self,
        predicate: Callable[[str], bool],
        convert: Callable[[str], str],
    ) -> MutableTextBuffer:
        chars = list(self._collapse())
        changed = False
        for i, ch in enumerate(chars):
            if predicate(ch):
                converted = convert(ch)
                # Single-character mappings only (no "ß" -> "SS")
                if len(converted) == 1:
                    chars[i] = converted
                    changed = True
        if changed:
            self._store("".join(chars))
        return self

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __iadd__(self, value: AppendValue) -> MutableTextBuffer:
        return self.append(value)

    def __getitem__(self, index: int | slice) -> str:
        text = self._collapse()
        if isinstance(index, int) and not -len(text) <= index < len(text):
            raise BufferRangeError("index out of range", start_index=index, size=len(text))
        return text[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MutableTextBuffer):
            return self.to_text() == other.to_text()
        if isinstance(other, str):
            return self.to_text() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"MutableTextBuffer({self.to_text()!r}, capacity={self._capacity})"

    def __len__(self) -> int:
        """Return number of characters (not number of fragments)."""
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0


AppendValue = str | bool | int | float | Sequence[str] | MutableTextBuffer


def format_value(value: object) -> str:
    """Return the canonical text form of a value accepted by append().

    Booleans render as ``True``/``False``, numbers with ``str()``, character
    sequences are joined, buffers contribute their current content.

    Raises:
        TypeError: For any other type
    """
    match value:
        case str():
            return value
        case bool() | int() | float():
            return str(value)
        case MutableTextBuffer():
            return value.to_text()
        case list() | tuple() if all(isinstance(c, str) for c in value):
            return "".join(value)
    raise TypeError(f"cannot append value of type {type(value).__name__}")

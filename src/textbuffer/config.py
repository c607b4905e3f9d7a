"""ContextVar-based buffer configuration for textbuffer.

Holds the preset capacities used by the accessors in textbuffer.pool and
the clear() capacity policy of MutableTextBuffer.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so changing the config in one thread never affects another.

Usage:
    from textbuffer import small
    from textbuffer.config import BufferConfig, buffer_config_context

    with buffer_config_context(BufferConfig(small_capacity=32)):
        buf = small()  # capacity 32

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Immutable buffer configuration.

    Attributes:
        small_capacity: Initial capacity of small() buffers
        medium_capacity: Initial capacity of medium() buffers
        large_capacity: Initial capacity of large() buffers
        shared_capacity: Capacity the shared instance is allocated with
            (read once, on first access)
        retain_capacity_on_clear: Keep the pre-sized capacity when clear()
            is called instead of dropping to a zero-capacity store

    """

    small_capacity: int = 64
    medium_capacity: int = 256
    large_capacity: int = 1024
    shared_capacity: int = 1024
    retain_capacity_on_clear: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BufferConfig":
        """Create BufferConfig from dictionary.

        Only includes keys that are valid BufferConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = BufferConfig.from_dict({
            ...     "small_capacity": 16,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.small_capacity
            16

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BufferConfig = BufferConfig()

_buffer_config: ContextVar[BufferConfig] = ContextVar(
    "buffer_config",
    default=_DEFAULT_CONFIG,
)


def get_buffer_config() -> BufferConfig:
    """Get current buffer configuration (thread-local)."""
    return _buffer_config.get()


def set_buffer_config(config: BufferConfig) -> None:
    """Set buffer configuration for current context.

    Args:
        config: BufferConfig instance to use for this context.

    """
    _buffer_config.set(config)


def reset_buffer_config() -> None:
    """Reset to default configuration."""
    _buffer_config.set(_DEFAULT_CONFIG)


@contextmanager
def buffer_config_context(config: BufferConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> from textbuffer import medium
        >>> with buffer_config_context(BufferConfig(medium_capacity=512)):
        ...     medium().capacity
        512

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _buffer_config.get()
    _buffer_config.set(config)
    try:
        yield
    finally:
        _buffer_config.set(previous)


__all__ = [
    "BufferConfig",
    "buffer_config_context",
    "get_buffer_config",
    "reset_buffer_config",
    "set_buffer_config",
]

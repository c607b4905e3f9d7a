"""Tests for ContextVar-based buffer configuration.

Validates defaults, from_dict filtering, context manager restore, thread
isolation and the effect of config on presets and clear().
"""

from threading import Thread

import pytest

from textbuffer import (
    BufferConfig,
    buffer_config_context,
    create,
    get_buffer_config,
    large,
    medium,
    reset_buffer_config,
    set_buffer_config,
    small,
)


class TestBufferConfigDataclass:
    """BufferConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Defaults match the documented presets."""
        config = BufferConfig()
        assert config.small_capacity == 64
        assert config.medium_capacity == 256
        assert config.large_capacity == 1024
        assert config.shared_capacity == 1024
        assert config.retain_capacity_on_clear is False

    def test_immutability(self) -> None:
        """Config is frozen."""
        config = BufferConfig()
        with pytest.raises(AttributeError):
            config.small_capacity = 1  # type: ignore[misc]

    def test_from_dict(self) -> None:
        """from_dict() sets the given fields."""
        config = BufferConfig.from_dict({"small_capacity": 16, "retain_capacity_on_clear": True})
        assert config.small_capacity == 16
        assert config.retain_capacity_on_clear is True
        assert config.large_capacity == 1024

    def test_from_dict_ignores_unknown_keys(self) -> None:
        """Unknown keys are ignored."""
        config = BufferConfig.from_dict({"medium_capacity": 10, "unknown": "ignored"})
        assert config.medium_capacity == 10

    def test_from_dict_empty(self) -> None:
        """An empty dict gives the default config."""
        assert BufferConfig.from_dict({}) == BufferConfig()


class TestContextVarFunctions:
    """get/set/reset functions."""

    def test_default(self) -> None:
        """The default config is active out of the box."""
        assert get_buffer_config() == BufferConfig()

    def test_set_and_reset(self) -> None:
        """set_buffer_config() applies until reset."""
        custom = BufferConfig(small_capacity=8)
        set_buffer_config(custom)
        try:
            assert get_buffer_config() is custom
            assert small().capacity == 8
        finally:
            reset_buffer_config()
        assert get_buffer_config() == BufferConfig()

    def test_context_manager_restores(self) -> None:
        """The context manager restores the previous config."""
        with buffer_config_context(BufferConfig(medium_capacity=512)):
            assert medium().capacity == 512
        assert medium().capacity == 256

    def test_context_manager_restores_on_error(self) -> None:
        """The previous config is restored after an exception."""
        with pytest.raises(RuntimeError):
            with buffer_config_context(BufferConfig(large_capacity=1)):
                raise RuntimeError("boom")
        assert large().capacity == 1024

    def test_nested_contexts(self) -> None:
        """Nested contexts unwind in order."""
        with buffer_config_context(BufferConfig(small_capacity=1)):
            with buffer_config_context(BufferConfig(small_capacity=2)):
                assert small().capacity == 2
            assert small().capacity == 1

    def test_thread_isolation(self) -> None:
        """Config set in a thread stays in that thread."""
        results: dict[int, int] = {}

        def worker(thread_id: int, capacity: int) -> None:
            set_buffer_config(BufferConfig(small_capacity=capacity))
            results[thread_id] = small().capacity

        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate((8, 16, 32))]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: 8, 1: 16, 2: 32}
        assert small().capacity == 64


class TestClearPolicy:
    """clear() capacity handling under both settings."""

    def test_default_drops_capacity(self) -> None:
        """clear() drops capacity under the default config."""
        assert create(128).append("abc").clear().capacity == 0

    def test_retain_capacity(self) -> None:
        """retain_capacity_on_clear keeps the capacity."""
        with buffer_config_context(BufferConfig(retain_capacity_on_clear=True)):
            buf = create(128).append("abc").clear()
        assert buf.capacity == 128
        assert buf.to_text() == ""

"""Tests for textbuffer utility modules."""

import logging

from textbuffer import create, shared


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        """Foreign names get the textbuffer prefix."""
        from textbuffer.utils.logger import get_logger

        assert get_logger("mymodule").name == "textbuffer.mymodule"

    def test_keeps_package_names(self) -> None:
        """Package names are left alone."""
        from textbuffer.utils.logger import get_logger

        assert get_logger("textbuffer").name == "textbuffer"
        assert get_logger("textbuffer.buffer").name == "textbuffer.buffer"

    def test_returns_stdlib_logger(self) -> None:
        """A standard library logger is returned."""
        from textbuffer.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)


class TestDebugLogging:
    """Debug records emitted by buffer operations."""

    def test_growth_logged(self, caplog) -> None:
        """Capacity growth is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="textbuffer"):
            create(2).append("abcdef")
        assert any("Growing capacity 2 -> 6" in r.getMessage() for r in caplog.records)

    def test_clear_logged(self, caplog) -> None:
        """Released capacity is logged on clear()."""
        with caplog.at_level(logging.DEBUG, logger="textbuffer"):
            create(32).clear()
        assert any("released capacity 32" in r.getMessage() for r in caplog.records)

    def test_no_records_without_growth(self, caplog) -> None:
        """Appends within capacity log nothing."""
        with caplog.at_level(logging.DEBUG, logger="textbuffer"):
            shared().append("x")
        assert not [r for r in caplog.records if r.name == "textbuffer.buffer"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for utils/decorators.py."""

from __future__ import annotations

import logging

import pytest

from docmark.utils.decorators import debug_timer

LOGGER_NAME = "docmark.tests.timer"


@pytest.mark.unit
class TestDebugTimer:
    """Test the debug_timer context manager."""

    def test_logs_elapsed_time_at_debug(self, caplog) -> None:
        """Test completion is logged when DEBUG is enabled."""
        logger = logging.getLogger(LOGGER_NAME)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with debug_timer(logger, "Compiling page.md"):
                pass
        assert any("Compiling page.md completed in" in message for message in caplog.messages)

    def test_silent_above_debug(self, caplog) -> None:
        """Test nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger(LOGGER_NAME)
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            with debug_timer(logger, "Compiling page.md"):
                pass
        assert caplog.messages == []

    def test_failure_is_logged_and_reraised(self, caplog) -> None:
        """Test an exception in the block propagates after being timed."""
        logger = logging.getLogger(LOGGER_NAME)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(ValueError):
                with debug_timer(logger, "Compiling page.md"):
                    raise ValueError("boom")
        assert any("Compiling page.md failed after" in message for message in caplog.messages)

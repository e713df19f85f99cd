#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for CLI logging configuration."""

import logging

import pytest
from rich.logging import RichHandler

from docmark.exceptions import ValidationError
from docmark.logging_utils import configure_logging, resolve_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove the handlers installed by a test and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if not type(h).__module__.startswith("_pytest")]


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name handling."""

    @pytest.mark.parametrize(
        "name,expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("Error", logging.ERROR)],
    )
    def test_names(self, name, expected) -> None:
        """Test names are case-insensitive."""
        assert resolve_log_level(name) == expected

    def test_numeric_passthrough(self) -> None:
        """Test numeric levels are returned unchanged."""
        assert resolve_log_level(15) == 15

    def test_unknown_name(self) -> None:
        """Test an unknown name is rejected instead of silently defaulting."""
        with pytest.raises(ValidationError) as exc_info:
            resolve_log_level("LOUD")
        assert exc_info.value.parameter_name == "log_level"


@pytest.mark.unit
class TestConfigureLogging:
    """Test root logger setup."""

    def test_console_handler(self) -> None:
        """Test a single stderr handler at the requested level."""
        root = configure_logging("WARNING")
        handlers = _own_handlers(root)
        assert root.level == logging.WARNING
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].formatter._fmt == "%(levelname)s: %(message)s"

    def test_trace_format(self) -> None:
        """Test trace mode adds timestamps and logger names."""
        root = configure_logging(logging.DEBUG, trace_mode=True)
        fmt = _own_handlers(root)[0].formatter._fmt
        assert "asctime" in fmt
        assert "name" in fmt

    def test_rich_handler(self) -> None:
        """Test rich console output."""
        root = configure_logging("INFO", rich_output=True)
        assert isinstance(_own_handlers(root)[0], RichHandler)

    def test_repeat_calls_replace_handlers(self) -> None:
        """Test configuring twice does not duplicate output."""
        configure_logging("INFO")
        root = configure_logging("INFO")
        assert len(_own_handlers(root)) == 1

    def test_log_file(self, tmp_path) -> None:
        """Test records are appended to the log file."""
        log_file = tmp_path / "docmark.log"
        root = configure_logging("WARNING", log_file=str(log_file))
        assert len(_own_handlers(root)) == 2
        logging.getLogger("docmark.tests").warning("Unresolved symbol link: mod::fn")
        for handler in root.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Unresolved symbol link: mod::fn" in content
        assert "[docmark.tests]" in content

    def test_unwritable_log_file(self, tmp_path) -> None:
        """Test a log file that cannot be opened leaves console logging in place."""
        root = configure_logging("WARNING", log_file=str(tmp_path / "missing" / "docmark.log"))
        assert len(_own_handlers(root)) == 1

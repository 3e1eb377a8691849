"""Tests for logging configuration."""

import logging
import sys
from pathlib import Path

from digital_clock.logging.config import configure_logging, get_logger


def test_configure_logging_defaults() -> None:
    """Test logging configuration with defaults."""
    configure_logging()
    logger = logging.getLogger("digital_clock")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_console_handler_uses_stderr() -> None:
    """Console logs must not mix with clock lines on stdout."""
    configure_logging()
    logger = logging.getLogger("digital_clock")
    assert logger.handlers[0].stream is sys.stderr


def test_configure_logging_debug_level() -> None:
    """Test logging configuration with DEBUG level."""
    configure_logging(log_level="debug")
    logger = logging.getLogger("digital_clock")
    assert logger.level == logging.DEBUG


def test_configure_logging_replaces_handlers() -> None:
    """Reconfiguring does not stack handlers."""
    configure_logging()
    configure_logging()
    assert len(logging.getLogger("digital_clock").handlers) == 1


def test_configure_logging_with_file(tmp_path: Path) -> None:
    """Test logging configuration with file output."""
    log_file = tmp_path / "logs" / "clock.log"
    configure_logging(log_level="INFO", log_file=log_file)

    logger = logging.getLogger("digital_clock")
    logger.info("Test message")

    assert log_file.exists()
    assert "Test message" in log_file.read_text()


def test_configure_logging_no_console(tmp_path: Path) -> None:
    """Test logging configuration without console output."""
    log_file = tmp_path / "clock.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    logger = logging.getLogger("digital_clock")
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert handler_types == ["FileHandler"]


def test_get_logger() -> None:
    """Test get_logger namespacing."""
    assert get_logger("test_module").name == "digital_clock.test_module"
    assert get_logger("digital_clock.clock.service").name == "digital_clock.clock.service"
    assert get_logger("digital_clock").name == "digital_clock"
    assert get_logger("digital_clockwork").name == "digital_clock.digital_clockwork"


def test_logging_format(tmp_path: Path) -> None:
    """Test that log messages have correct format."""
    log_file = tmp_path / "clock.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    get_logger("test").info("Test message")

    content = log_file.read_text()
    assert "digital_clock.test" in content
    assert "INFO" in content
    assert "|" in content

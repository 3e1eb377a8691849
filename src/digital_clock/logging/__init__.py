"""Logging utilities for Digital Clock."""

from digital_clock.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

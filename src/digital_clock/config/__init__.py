"""Configuration for Digital Clock."""

from digital_clock.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

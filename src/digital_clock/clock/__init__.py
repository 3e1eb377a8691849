"""Console clock: time source, rendering and the display loop."""

from digital_clock.clock.errors import ClockError, ClockUnavailable, ConversionFailure
from digital_clock.clock.renderer import LocalTimeFields, render
from digital_clock.clock.service import ClockLoop
from digital_clock.clock.source import SystemClock

__all__ = [
    "ClockError",
    "ClockUnavailable",
    "ConversionFailure",
    "LocalTimeFields",
    "render",
    "ClockLoop",
    "SystemClock",
]

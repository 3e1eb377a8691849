"""Host clock facility: current instant, local-time conversion and delay."""

import time

from digital_clock.clock.errors import ClockUnavailable, ConversionFailure
from digital_clock.clock.renderer import LocalTimeFields


class SystemClock:
    """Clock source backed by the host's ``time`` module."""

    def now(self) -> float:
        """Return the current instant as a POSIX timestamp."""
        try:
            return time.time()
        except OSError as e:
            raise ClockUnavailable(f"System clock unavailable: {e}") from e

    def to_local(self, instant: float) -> LocalTimeFields:
        """
        Convert an instant to local calendar fields.

        Args:
            instant: POSIX timestamp

        Returns:
            Local hour, minute and second

        Raises:
            ConversionFailure: If the host cannot represent the instant
        """
        try:
            tm = time.localtime(instant)
        except (OverflowError, OSError, ValueError) as e:
            raise ConversionFailure(
                f"Cannot convert {instant!r} to local time: {e}"
            ) from e

        # Leap second
        second = min(tm.tm_sec, 59)
        return LocalTimeFields(hour=tm.tm_hour, minute=tm.tm_min, second=second)

    def sleep(self, seconds: float) -> None:
        """Block for approximately ``seconds``."""
        time.sleep(seconds)

"""Clock display loop."""

import sys
from typing import Optional, Protocol, TextIO

from digital_clock.clock.renderer import LocalTimeFields, render
from digital_clock.clock.source import SystemClock
from digital_clock.logging.config import get_logger

logger = get_logger(__name__)

TICK_SECONDS = 1.0


class ClockSource(Protocol):
    """Host clock capabilities used by the loop."""

    def now(self) -> float: ...

    def to_local(self, instant: float) -> LocalTimeFields: ...

    def sleep(self, seconds: float) -> None: ...


class ClockLoop:
    """Prints the local time once per second until the process is stopped."""

    def __init__(
        self,
        source: Optional[ClockSource] = None,
        output: Optional[TextIO] = None,
        zero_pad: bool = True,
        banner: Optional[str] = "DIGITAL CLOCK",
    ):
        """
        Initialize clock loop.

        Args:
            source: Clock source, defaults to the system clock
            output: Stream to write to, defaults to stdout at write time
            zero_pad: Render two-digit fields
            banner: Line printed once before the loop, None to skip it
        """
        self.source = source if source is not None else SystemClock()
        self.output = output
        self.zero_pad = zero_pad
        self.banner = banner

    def _write_line(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        # One write per line so an interrupt never leaves half a line.
        stream.write(text + "\n")
        stream.flush()

    def tick(self) -> LocalTimeFields:
        """Sample the clock, print one line and pause."""
        fields = self.source.to_local(self.source.now())
        line = render(fields, zero_pad=self.zero_pad)
        self._write_line(line)
        logger.debug(f"Printed {line}")

        self.source.sleep(TICK_SECONDS)
        return fields

    def start(self, max_ticks: Optional[int] = None) -> None:
        """
        Run the clock.

        Never returns unless ``max_ticks`` is given. Clock errors propagate
        to the caller.

        Args:
            max_ticks: Stop after this many lines
        """
        if self.banner:
            self._write_line(self.banner)

        logger.info("Clock started")
        running = True
        ticks = 0
        while running:
            self.tick()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                running = False

        logger.info(f"Clock stopped after {ticks} ticks")

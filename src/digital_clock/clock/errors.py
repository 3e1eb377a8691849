"""Clock errors."""


class ClockError(Exception):
    """Base class for clock failures. Always fatal to the display loop."""


class ClockUnavailable(ClockError):
    """The host could not supply the current time."""


class ConversionFailure(ClockError):
    """An instant could not be decomposed into local calendar fields."""

"""Digital Clock - prints the local time once per second."""

__version__ = "0.1.0"

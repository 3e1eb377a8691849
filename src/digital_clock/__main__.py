"""Allow running as ``python -m digital_clock``."""

from digital_clock.cli import app

if __name__ == "__main__":
    app()

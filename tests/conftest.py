import logging

import pytest

from digital_clock.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run each test in an empty directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("ZERO_PAD", "BANNER", "LOG_LEVEL", "LOG_FILE", "DEBUG"):
        monkeypatch.delenv(f"CLOCK_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    # Handlers may point at streams captured by CliRunner.
    logger = logging.getLogger("digital_clock")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class FakeClock:
    """Clock source returning scripted local times without sleeping."""

    def __init__(self, times):
        self.times = list(times)
        self.instants = []
        self.sleeps = []

    def now(self):
        instant = float(len(self.instants))
        self.instants.append(instant)
        return instant

    def to_local(self, instant):
        from digital_clock.clock.renderer import LocalTimeFields

        hour, minute, second = self.times[int(instant)]
        return LocalTimeFields(hour=hour, minute=minute, second=second)

    def sleep(self, seconds):
        self.sleeps.append(seconds)


@pytest.fixture
def fake_clock_factory():
    return FakeClock

"""
Shared fixtures: a hand-driven clock, in-memory and failing settings stores,
and a watch factory.
"""

import logging
from datetime import datetime

import pytest

from casiotoy.clock_dummy import ClockDummy
from casiotoy.persistent import MemorySettingsStore, SettingsError, SettingsStoreInterface
from casiotoy.settings import Settings
from casiotoy.shared import WatchModel
from casiotoy.watch import Watch

logger = logging.getLogger(__name__)

# A Friday afternoon.
START = datetime(2024, 3, 1, 13, 5, 0)


class FailingStore(SettingsStoreInterface):
    """Loads fine (unless told otherwise), refuses every save."""

    def __init__(self, fail_load: bool = False):
        self.fail_load = fail_load
        self.save_attempts = 0

    def load(self) -> Settings:
        if self.fail_load:
            raise SettingsError("disk on fire")
        return Settings()

    def save(self, settings: Settings) -> None:
        self.save_attempts += 1
        raise SettingsError("read-only filesystem")


@pytest.fixture
def clock():
    return ClockDummy(START)


@pytest.fixture
def store():
    return MemorySettingsStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def make_watch(clock, store):
    """Build a watch on the shared clock; ticks once so `now` is current."""

    def _make(model=WatchModel.STANDARD, settings_store=None, **settings):
        s = settings_store if settings_store is not None else store
        if settings:
            s.save(Settings(**settings))
        watch = Watch(model, s, clock)
        watch.tick()
        logger.debug(f"made {model} watch at {clock.now()}")
        return watch

    return _make

from .watch import Watch
from .shared import WatchModel, StandardMode, MinimalMode, Command, AlarmFired
from .settings import Settings
from .persistent import JsonSettingsStore, MemorySettingsStore, SettingsError
from .clock_system import SystemClock
from .clock_dummy import ClockDummy
from .renderer import render, WatchFace
from .UI import WatchUI

__all__ = [
    "Watch", "WatchModel", "StandardMode", "MinimalMode", "Command", "AlarmFired",
    "Settings", "JsonSettingsStore", "MemorySettingsStore", "SettingsError",
    "SystemClock", "ClockDummy", "render", "WatchFace", "WatchUI",
]

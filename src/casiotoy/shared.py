from __future__ import annotations

from dataclasses import dataclass
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
import typing as tp

class StandardMode(Enum):
    HOME = 'Home'
    WORLD_TIME = 'WorldTime'
    ALARM = 'Alarm'
    TIMER = 'Timer'
    STOPWATCH = 'Stopwatch'

class MinimalMode(Enum):
    TIME = 'Time'
    ALARM = 'Alarm'
    STOPWATCH = 'Stopwatch'

Mode = tp.Union[StandardMode, MinimalMode]

class WatchModel(Enum):
    STANDARD = 'standard'
    MINIMAL = 'minimal'

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def face_size(self) -> tuple[int, int]:
        '''
        (width, height) of the watch face, border included.
        '''
        return _FACE_SIZES[self]

    @property
    def modes(self) -> tuple[Mode, ...]:
        '''
        The cyclic mode order. Declaration order of the enum.
        '''
        return tuple(_MODE_ENUMS[self])

    @property
    def initial_mode(self) -> Mode:
        return self.modes[0]

    @classmethod
    def fromName(cls, name: str) -> WatchModel:
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f'Unknown watch model: {name!r}') from None

_TITLES = {
    WatchModel.STANDARD: 'Casio AE-1200',
    WatchModel.MINIMAL: 'Casio F-91W',
}
_FACE_SIZES = {
    WatchModel.STANDARD: (50, 15),
    WatchModel.MINIMAL: (30, 10),
}
_MODE_ENUMS: dict[WatchModel, type[Enum]] = {
    WatchModel.STANDARD: StandardMode,
    WatchModel.MINIMAL: MinimalMode,
}
_ALIASES = {
    'standard': WatchModel.STANDARD,
    'ae1200': WatchModel.STANDARD,
    'ae-1200': WatchModel.STANDARD,
    'minimal': WatchModel.MINIMAL,
    'f91w': WatchModel.MINIMAL,
    'f-91w': WatchModel.MINIMAL,
}

def nextMode(model: WatchModel, mode: Mode) -> Mode:
    modes = model.modes
    assert mode in modes, f'{mode} does not belong to {model}'
    return modes[(modes.index(mode) + 1) % len(modes)]

class Command(Enum):
    QUIT = 'quit'
    ADVANCE_MODE = 'advance_mode'
    TOGGLE_RUN_STOP = 'toggle_run_stop'
    RESET = 'reset'
    TOGGLE_LIGHT = 'toggle_light'
    TOGGLE_ALARM = 'toggle_alarm'

class TimerPhase:
    '''
    Either idle, or running since a monotonic `anchor`.
    `base_ns` is what had accumulated before the anchor.
    Both are integer nanoseconds.
    '''

    class Base(ABC):
        @property
        @abstractmethod
        def is_running(self) -> bool:
            raise NotImplementedError()

    @dataclass(frozen=True)
    class Idle(Base):
        @property
        def is_running(self) -> bool:
            return False

    @dataclass(frozen=True)
    class Running(Base):
        anchor: int
        base_ns: int = 0

        @property
        def is_running(self) -> bool:
            return True

class LightPhase:
    class Base(ABC):
        @property
        @abstractmethod
        def is_on(self) -> bool:
            raise NotImplementedError()

    @dataclass(frozen=True)
    class Off(Base):
        @property
        def is_on(self) -> bool:
            return False

    @dataclass(frozen=True)
    class On(Base):
        anchor: int

        @property
        def is_on(self) -> bool:
            return True

@dataclass(frozen=True)
class AlarmFired:
    '''
    Returned by `Watch.tick()` when the armed alarm minute is reached.
    Nothing rings; acting on it is up to the caller.
    '''
    alarm_time: str
    at: datetime

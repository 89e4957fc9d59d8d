from __future__ import annotations

import logging
from datetime import datetime

from .shared import (
    WatchModel, Mode, StandardMode, MinimalMode, AlarmFired, nextMode,
)
from .settings import Settings
from .persistent import SettingsStoreInterface
from .clock_interface import ClockInterface
from .clock_system import SystemClock
from .elapsed import ElapsedTimer, Backlight
from .time_format import TimeFormatter, alarm_time_after

log = logging.getLogger(__name__)

TIMER_MODES: dict[Mode, str] = {
    StandardMode.TIMER: 'timer',
    StandardMode.STOPWATCH: 'stopwatch',
    MinimalMode.STOPWATCH: 'stopwatch',
}

class Watch:
    '''
    The whole watch state. Mutated in place by commands and by `tick()`.
    Timers keep running while other modes are shown;
    the mode only selects what is displayed and which timer S/R act on.
    '''

    def __init__(
        self,
        model: WatchModel,
        store: SettingsStoreInterface,
        clock: ClockInterface | None = None,
    ) -> None:
        self.model = model
        self.store = store
        self.clock = clock if clock is not None else SystemClock()

        self.settings: Settings = store.load()
        self.mode: Mode = model.initial_mode
        self.now: datetime = self.clock.now()
        self.stopwatch = ElapsedTimer()
        self.timer = ElapsedTimer()
        self.light = Backlight()

    @property
    def formatter(self) -> TimeFormatter:
        return TimeFormatter(self.now)

    @property
    def active_timer(self) -> ElapsedTimer | None:
        '''
        The timer that start/stop and reset apply to in the current mode.
        '''
        name = TIMER_MODES.get(self.mode)
        if name is None:
            return None
        return getattr(self, name)

    def tick(self) -> AlarmFired | None:
        self.now = self.clock.now()
        mono = self.clock.monotonic()
        self.stopwatch.refresh(mono)
        self.timer.refresh(mono)
        if self.light.expire(mono, self.settings.auto_light_duration):
            log.debug('Backlight timed out.')
        if (
            self.settings.alarm_enabled
            and self.settings.alarm_time is not None
            and self.formatter.alarm_matches(self.settings.alarm_time)
        ):
            return AlarmFired(alarm_time=self.settings.alarm_time, at=self.now)
        return None

    def advance_mode(self) -> None:
        self.mode = nextMode(self.model, self.mode)
        log.debug(f'Mode -> {self.mode.value}')

    def toggle_run(self) -> None:
        timer = self.active_timer
        if timer is None:
            return
        timer.toggle(self.clock.monotonic())
        log.debug(f'{self.mode.value} running={timer.running} at {timer.accumulated_ms} ms')

    def reset(self) -> None:
        timer = self.active_timer
        if timer is None:
            return
        timer.reset()
        log.debug(f'{self.mode.value} reset')

    def toggle_light(self) -> None:
        self.light.toggle(self.clock.monotonic())

    def toggle_alarm(self) -> None:
        '''
        Arming always schedules the alarm one minute from now.
        There is no way to enter an arbitrary alarm time yet.
        Settings are saved either way; a `SettingsError` propagates,
        leaving the in-memory toggle in place.
        '''
        enabled = not self.settings.alarm_enabled
        self.settings.alarm_enabled = enabled
        if enabled:
            self.settings.alarm_time = alarm_time_after(self.clock.now(), minutes=1)
            log.info(f'Alarm armed for {self.settings.alarm_time}')
        else:
            self.settings.alarm_time = None
            log.info('Alarm disarmed')
        self.store.save(self.settings)

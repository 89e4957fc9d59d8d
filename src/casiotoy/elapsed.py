from __future__ import annotations

from .shared import TimerPhase, LightPhase

NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000

def nanosSince(anchor: int, now: int) -> int:
    return max(0, now - anchor)

class ElapsedTimer:
    '''
    Counts up while running.
    The live value is always derived from the anchor, so refreshing twice
    at the same instant gives the same result.  
    Time is kept in integer nanoseconds and only truncated to
    milliseconds for display, so start/stop cycles never drop a remainder.
    '''

    def __init__(self) -> None:
        self.accumulated_ns = 0
        self.phase: TimerPhase.Base = TimerPhase.Idle()

    @property
    def accumulated_ms(self) -> int:
        return self.accumulated_ns // NS_PER_MS

    @property
    def running(self) -> bool:
        return self.phase.is_running

    @property
    def anchor(self) -> int | None:
        match self.phase:
            case TimerPhase.Running(anchor=anchor):
                return anchor
            case _:
                return None

    def refresh(self, now: int) -> None:
        match self.phase:
            case TimerPhase.Running(anchor=anchor, base_ns=base_ns):
                self.accumulated_ns = base_ns + nanosSince(anchor, now)
            case _:
                pass

    def start(self, now: int) -> None:
        if self.running:
            return
        self.phase = TimerPhase.Running(anchor=now, base_ns=self.accumulated_ns)

    def stop(self, now: int) -> None:
        if not self.running:
            return
        self.refresh(now)
        self.phase = TimerPhase.Idle()

    def toggle(self, now: int) -> None:
        if self.running:
            self.stop(now)
        else:
            self.start(now)

    def reset(self) -> None:
        self.accumulated_ns = 0
        self.phase = TimerPhase.Idle()

class Backlight:
    def __init__(self) -> None:
        self.phase: LightPhase.Base = LightPhase.Off()

    @property
    def on(self) -> bool:
        return self.phase.is_on

    @property
    def anchor(self) -> int | None:
        match self.phase:
            case LightPhase.On(anchor=anchor):
                return anchor
            case _:
                return None

    def turnOn(self, now: int) -> None:
        self.phase = LightPhase.On(anchor=now)

    def turnOff(self) -> None:
        self.phase = LightPhase.Off()

    def toggle(self, now: int) -> None:
        if self.on:
            self.turnOff()
        else:
            self.turnOn(now)

    def expire(self, now: int, duration_s: int) -> bool:
        '''
        Turns the light off once it has been on for `duration_s` seconds.
        Returns whether it did.
        '''
        match self.phase:
            case LightPhase.On(anchor=anchor) if now - anchor >= duration_s * NS_PER_S:
                self.turnOff()
                return True
            case _:
                return False

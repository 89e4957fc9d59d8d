from datetime import datetime, timedelta

from .clock_interface import ClockInterface

NS_PER_S = 1_000_000_000

class ClockDummy(ClockInterface):
    '''
    A clock that only moves when told to.  
    Wall-clock and monotonic time advance together.
    '''

    def __init__(
        self, start: datetime | None = None, monotonic_origin_ns: int = 1000 * NS_PER_S,
    ) -> None:
        self._now = start if start is not None else datetime(2024, 1, 1, 12, 0, 0)
        self._monotonic_ns = monotonic_origin_ns

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> int:
        return self._monotonic_ns

    def advance(self, seconds: float) -> None:
        assert seconds >= 0, 'monotonic time cannot go backwards'
        delta_ns = round(seconds * NS_PER_S)
        self._monotonic_ns += delta_ns
        self._now += timedelta(microseconds=delta_ns // 1000)

    def setNow(self, now: datetime) -> None:
        '''
        Jumps the wall clock only, like a user changing the system time.
        '''
        self._now = now

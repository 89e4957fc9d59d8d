import time
from datetime import datetime

from .clock_interface import ClockInterface

class SystemClock(ClockInterface):
    def now(self) -> datetime:
        return datetime.now()

    def monotonic(self) -> int:
        return time.monotonic_ns()

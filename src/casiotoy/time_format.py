'''
Display strings for a wall-clock instant.
Month and weekday names are fixed English abbreviations, so the output
does not depend on the process locale.
'''

from __future__ import annotations

import re
from datetime import datetime, timedelta

WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

ALARM_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')

def parse_alarm_time(text: str | None) -> tuple[int, int] | None:
    '''
    `"HH:MM"` -> `(hour, minute)`. Anything else -> `None`, never raises.
    '''
    if not isinstance(text, str):
        return None
    m = ALARM_TIME_PATTERN.match(text.strip())
    if m is None:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute

def alarm_time_after(now: datetime, minutes: int = 1) -> str:
    return (now + timedelta(minutes=minutes)).strftime('%H:%M')

def format_elapsed(milliseconds: int) -> str:
    '''
    `MM:SS.cc`. Minutes keep counting past 59.
    '''
    milliseconds = max(0, milliseconds)
    total_seconds, ms = divmod(milliseconds, 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f'{minutes:02d}:{seconds:02d}.{ms // 10:02d}'

class TimeFormatter:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def format_time(self, format_24h: bool) -> str:
        t = self.now
        if format_24h:
            return f'{t.hour:02d}:{t.minute:02d}:{t.second:02d}'
        hour_12 = t.hour % 12 or 12
        meridiem = 'AM' if t.hour < 12 else 'PM'
        return f'{hour_12:02d}:{t.minute:02d}:{t.second:02d} {meridiem}'

    def format_date(self, us_order: bool) -> str:
        t = self.now
        if us_order:
            return f'{t.month:02d}/{t.day:02d}'
        return f'{t.day:02d}/{t.month:02d}'

    def format_weekday(self) -> str:
        return WEEKDAYS[self.now.weekday()]

    def format_year(self) -> str:
        return f'{self.now.year:04d}'

    def alarm_matches(self, target: str | None) -> bool:
        parsed = parse_alarm_time(target)
        if parsed is None:
            return False
        return parsed == (self.now.hour, self.now.minute)

'''
Watch state -> character grid, tagged with semantic roles.
Pure: reads the watch, never the clock. Drawing is left to the UI.
'''

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import typing as tp

from rich.text import Text

from .shared import WatchModel, Mode, StandardMode, MinimalMode
from .time_format import format_elapsed
from .elapsed import ElapsedTimer
from .watch import Watch

class Role(Enum):
    FRAME = 'frame'
    TITLE = 'title'
    LABEL = 'label'
    VALUE = 'value'
    INFO = 'info'
    RUNNING = 'running'
    STOPPED = 'stopped'
    ARMED = 'armed'
    DISARMED = 'disarmed'
    HELP = 'help'
    ANALOG = 'analog'
    LIGHT_INDICATOR = 'light_indicator'
    ALARM_INDICATOR = 'alarm_indicator'
    BLANK = 'blank'

ROLE_STYLES: dict[Role, str] = {
    Role.FRAME: 'blue',
    Role.TITLE: 'bold blue',
    Role.LABEL: 'bold yellow',
    Role.VALUE: 'bold green',
    Role.INFO: 'cyan',
    Role.RUNNING: 'red',
    Role.STOPPED: 'blue',
    Role.ARMED: 'bold cyan',
    Role.DISARMED: 'dim cyan',
    Role.HELP: 'white',
    Role.ANALOG: 'yellow',
    Role.LIGHT_INDICATOR: 'bold yellow',
    Role.ALARM_INDICATOR: 'bold red',
    Role.BLANK: '',
}

LIGHT_MARK = 'LGT'
ALARM_MARK = 'ALM'

@dataclass(frozen=True)
class Segment:
    text: str
    role: Role

Row = tuple[Segment, ...]

@dataclass(frozen=True)
class WatchFace:
    model: WatchModel
    title: str
    width: int
    height: int
    rows: tuple[Row, ...]

    def plain(self) -> list[str]:
        return [''.join(s.text for s in row) for row in self.rows]

    def segments(self, role: Role) -> list[Segment]:
        return [s for row in self.rows for s in row if s.role is role]

    def hasRole(self, role: Role) -> bool:
        return bool(self.segments(role))

    def toText(self) -> Text:
        text = Text(no_wrap=True, overflow='crop')
        for i, row in enumerate(self.rows):
            if i:
                text.append('\n')
            for s in row:
                text.append(s.text, style=ROLE_STYLES[s.role] or None)
        return text

def _blank(width: int) -> Row:
    return (Segment(' ' * width, Role.BLANK), )

def _centered(width: int, *segments: Segment) -> Row:
    used = sum(len(s.text) for s in segments)
    if used > width:
        return (Segment(''.join(s.text for s in segments)[:width], segments[0].role), )
    left = (width - used) // 2
    right = width - used - left
    row: list[Segment] = []
    if left:
        row.append(Segment(' ' * left, Role.BLANK))
    row.extend(segments)
    if right:
        row.append(Segment(' ' * right, Role.BLANK))
    return tuple(row)

def _help(width: int, text: str) -> Row:
    text = (' ' + text)[:width]
    return (Segment(text.ljust(width), Role.HELP), )

def _line(width: int, text: str, role: Role) -> Row:
    return _centered(width, Segment(text, role))

class HandAngles(tp.NamedTuple):
    hour: float
    minute: float
    second: float

def handAngles(t: datetime) -> HandAngles:
    '''
    Degrees clockwise from 12.
    '''
    return HandAngles(
        hour=(t.hour % 12) * 30.0 + t.minute / 2,
        minute=t.minute * 6.0 + t.second / 10,
        second=t.second * 6.0,
    )

ANALOG_WIDTH = 10

def analogGlyph(t: datetime) -> tuple[str, ...]:
    '''
    A 10x5 dial. Each hand lights up the sides of the dial whose
    half-plane it points into.
    '''
    h, m, s = handAngles(t)
    def pick(cond: bool, mark: str) -> str:
        return mark if cond else ' '
    up = pick(h >= 270 or h <= 90, '▲') + pick(m >= 270 or m <= 90, '●')
    left = pick(180 < h <= 360, '◀') + pick(180 < m <= 360, '●')
    centre = pick(180 < s <= 360, '·')
    right = pick(0 < m <= 180, '●') + pick(0 < h <= 180, '▶')
    down = pick(90 < m <= 270, '●') + pick(90 < h <= 270, '▼')
    return (
        '┌────────┐',
        f'│   {up}   │',
        f'│ {left} {centre}{right} │',
        f'│   {down}   │',
        '└────────┘',
    )

def _timerStatus(timer: ElapsedTimer, labels: tuple[str, str]) -> Segment:
    running_label, stopped_label = labels
    if timer.running:
        return Segment(running_label, Role.RUNNING)
    return Segment(stopped_label, Role.STOPPED)

STANDARD_HELP = "press 'M' for mode, 'L' for backlight"
STANDARD_TIMER_HELP = "press 'S' start/stop, 'R' reset"

def _standardHome(watch: Watch, width: int) -> list[Row]:
    fmt = watch.formatter
    s = watch.settings
    glyph = analogGlyph(watch.now)
    side_width = width - ANALOG_WIDTH - 2
    beside = [
        _blank(side_width),
        _line(side_width, fmt.format_time(s.time_format_24h), Role.VALUE),
        _blank(side_width),
        _line(side_width, f'{fmt.format_weekday()} {fmt.format_date(s.date_format_us)}', Role.INFO),
        _line(side_width, fmt.format_year(), Role.INFO),
    ]
    rows: list[Row] = [
        (
            Segment(' ', Role.BLANK),
            Segment(g, Role.ANALOG),
            Segment(' ', Role.BLANK),
            *b,
        )
        for g, b in zip(glyph, beside)
    ]
    rows += [
        _blank(width),
        _blank(width),
        _help(width, STANDARD_HELP),
    ]
    return rows

def _standardWorldTime(watch: Watch, width: int) -> list[Row]:
    fmt = watch.formatter
    return [
        _blank(width),
        _blank(width),
        _line(width, 'WT', Role.LABEL),
        _blank(width),
        _line(width, fmt.format_time(watch.settings.time_format_24h), Role.VALUE),
        _blank(width),
        _blank(width),
        _help(width, STANDARD_HELP),
    ]

def _standardAlarm(watch: Watch, width: int) -> list[Row]:
    s = watch.settings
    if s.alarm_enabled:
        status = Segment(s.alarm_time or 'Not set', Role.ARMED)
    else:
        status = Segment('Disabled', Role.DISARMED)
    return [
        _blank(width),
        _blank(width),
        _line(width, 'ALM', Role.LABEL),
        _blank(width),
        _centered(width, status),
        _blank(width),
        _blank(width),
        _help(width, "press 'A' to toggle, 'M' for mode"),
    ]

def _standardTimerLike(label: str, timer: ElapsedTimer, width: int) -> list[Row]:
    return [
        _blank(width),
        _blank(width),
        _line(width, label, Role.LABEL),
        _blank(width),
        _line(width, format_elapsed(timer.accumulated_ms), Role.VALUE),
        _blank(width),
        _centered(width, _timerStatus(timer, ('RUNNING', 'STOPPED'))),
        _blank(width),
        _blank(width),
        _help(width, STANDARD_TIMER_HELP),
        _help(width, STANDARD_HELP),
    ]

def _standardTimer(watch: Watch, width: int) -> list[Row]:
    return _standardTimerLike('TMR', watch.timer, width)

def _standardStopwatch(watch: Watch, width: int) -> list[Row]:
    return _standardTimerLike('STOPWATCH', watch.stopwatch, width)

MINIMAL_HELP = "press 'M' for mode"

def _minimalTime(watch: Watch, width: int) -> list[Row]:
    fmt = watch.formatter
    s = watch.settings
    return [
        _blank(width),
        _line(width, fmt.format_time(s.time_format_24h), Role.VALUE),
        _blank(width),
        _line(width, fmt.format_date(s.date_format_us), Role.INFO),
        _blank(width),
        _help(width, MINIMAL_HELP),
    ]

def _minimalAlarm(watch: Watch, width: int) -> list[Row]:
    s = watch.settings
    if s.alarm_enabled:
        status = Segment(s.alarm_time or '--:--', Role.ARMED)
    else:
        status = Segment('OFF', Role.DISARMED)
    return [
        _blank(width),
        _line(width, 'ALARM', Role.LABEL),
        _blank(width),
        _centered(width, status),
        _blank(width),
        _help(width, "press 'A' toggle, 'M' mode"),
    ]

def _minimalStopwatch(watch: Watch, width: int) -> list[Row]:
    timer = watch.stopwatch
    return [
        _blank(width),
        _line(width, 'STOPWATCH', Role.LABEL),
        _line(width, format_elapsed(timer.accumulated_ms), Role.VALUE),
        _centered(width, _timerStatus(timer, ('RUN', 'STOP'))),
        _blank(width),
        _help(width, "'S' start/stop, 'R' reset"),
        _help(width, MINIMAL_HELP),
    ]

ModeRenderer = tp.Callable[[Watch, int], list[Row]]

RENDERERS: dict[tuple[WatchModel, Mode], ModeRenderer] = {
    (WatchModel.STANDARD, StandardMode.HOME): _standardHome,
    (WatchModel.STANDARD, StandardMode.WORLD_TIME): _standardWorldTime,
    (WatchModel.STANDARD, StandardMode.ALARM): _standardAlarm,
    (WatchModel.STANDARD, StandardMode.TIMER): _standardTimer,
    (WatchModel.STANDARD, StandardMode.STOPWATCH): _standardStopwatch,
    (WatchModel.MINIMAL, MinimalMode.TIME): _minimalTime,
    (WatchModel.MINIMAL, MinimalMode.ALARM): _minimalAlarm,
    (WatchModel.MINIMAL, MinimalMode.STOPWATCH): _minimalStopwatch,
}

def _statusRow(watch: Watch, width: int) -> Row:
    '''
    Reserved for the corner indicators. Mode content never goes here.
    '''
    alarm = Segment(ALARM_MARK, Role.ALARM_INDICATOR) if (
        watch.settings.alarm_enabled
    ) else Segment(' ' * len(ALARM_MARK), Role.BLANK)
    light = Segment(LIGHT_MARK, Role.LIGHT_INDICATOR) if (
        watch.light.on
    ) else Segment(' ' * len(LIGHT_MARK), Role.BLANK)
    gap = width - len(ALARM_MARK) - len(LIGHT_MARK) - 2
    return (
        Segment(' ', Role.BLANK),
        alarm,
        Segment(' ' * gap, Role.BLANK),
        light,
        Segment(' ', Role.BLANK),
    )

def _frame(title: str, width: int, inner: list[Row]) -> tuple[Row, ...]:
    inner_width = width - 2
    title = title[:inner_width]
    top: Row = (
        Segment('┌', Role.FRAME),
        Segment(title, Role.TITLE),
        Segment('─' * (inner_width - len(title)) + '┐', Role.FRAME),
    )
    bottom: Row = (Segment('└' + '─' * inner_width + '┘', Role.FRAME), )
    side = Segment('│', Role.FRAME)
    return (top, *((side, *row, side) for row in inner), bottom)

def render(watch: Watch) -> WatchFace:
    model = watch.model
    width, height = model.face_size
    inner_width, inner_height = width - 2, height - 2
    body = RENDERERS[(model, watch.mode)](watch, inner_width)
    inner = [_statusRow(watch, inner_width), *body]
    assert len(inner) <= inner_height, f'{model} {watch.mode} overflows the face'
    inner += [_blank(inner_width)] * (inner_height - len(inner))
    return WatchFace(
        model=model,
        title=model.title,
        width=width,
        height=height,
        rows=_frame(model.title, width, inner),
    )

'''
One iteration of the poll loop: at most one command, then a tick.
'''

from __future__ import annotations

from dataclasses import dataclass
import typing as tp

from .shared import Command, AlarmFired
from .watch import Watch

POLL_INTERVAL_S = 0.1

KEY_COMMANDS: dict[str, Command] = {
    'q': Command.QUIT,
    'escape': Command.QUIT,
    'm': Command.ADVANCE_MODE,
    's': Command.TOGGLE_RUN_STOP,
    'r': Command.RESET,
    'l': Command.TOGGLE_LIGHT,
    'a': Command.TOGGLE_ALARM,
}

_DISPATCH: dict[Command, tp.Callable[[Watch], None]] = {
    Command.ADVANCE_MODE: Watch.advance_mode,
    Command.TOGGLE_RUN_STOP: Watch.toggle_run,
    Command.RESET: Watch.reset,
    Command.TOGGLE_LIGHT: Watch.toggle_light,
    Command.TOGGLE_ALARM: Watch.toggle_alarm,
}

@dataclass(frozen=True)
class StepResult:
    quit: bool = False
    alarm: AlarmFired | None = None

def apply(watch: Watch, command: Command) -> bool:
    '''
    Returns True iff the loop should stop.
    '''
    if command is Command.QUIT:
        return True
    _DISPATCH[command](watch)
    return False

def step(watch: Watch, command: Command | None = None) -> StepResult:
    if command is not None and apply(watch, command):
        return StepResult(quit=True)
    return StepResult(alarm=watch.tick())

import pytest

from casiotoy.control import KEY_COMMANDS, StepResult, apply, step
from casiotoy.persistent import SettingsError
from casiotoy.shared import Command, StandardMode


def test_every_command_has_a_key():
    assert set(KEY_COMMANDS.values()) == set(Command)
    assert KEY_COMMANDS["q"] is Command.QUIT
    assert KEY_COMMANDS["escape"] is Command.QUIT


def test_quit_stops_before_tick(make_watch, clock):
    w = make_watch()
    before = w.now
    clock.advance(5)
    assert step(w, Command.QUIT) == StepResult(quit=True)
    assert w.now == before


def test_idle_step_ticks(make_watch, clock):
    w = make_watch()
    clock.advance(5)
    result = step(w)
    assert not result.quit and result.alarm is None
    assert w.now == clock.now()


def test_command_then_tick(make_watch, clock):
    w = make_watch()
    step(w, Command.ADVANCE_MODE)
    step(w, Command.ADVANCE_MODE)
    step(w, Command.ADVANCE_MODE)
    step(w, Command.ADVANCE_MODE)
    assert w.mode is StandardMode.STOPWATCH
    step(w, Command.TOGGLE_RUN_STOP)
    clock.advance(1.5)
    step(w)
    assert w.stopwatch.accumulated_ms == 1500
    step(w, Command.RESET)
    assert w.stopwatch.accumulated_ms == 0
    assert not w.stopwatch.running


def test_light_expires_across_steps(make_watch, clock):
    w = make_watch(auto_light_duration=1)
    step(w, Command.TOGGLE_LIGHT)
    for _ in range(10):
        clock.advance(0.125)
        step(w)
    assert not w.light.on


def test_alarm_event_is_returned(make_watch, clock):
    w = make_watch()
    assert step(w, Command.TOGGLE_ALARM).alarm is None
    clock.advance(60)
    result = step(w)
    assert result.alarm is not None
    assert result.alarm.alarm_time == "13:06"
    assert not result.quit


def test_apply_reports_quit_only_for_quit(make_watch):
    w = make_watch()
    assert apply(w, Command.QUIT)
    assert not apply(w, Command.TOGGLE_LIGHT)


def test_settings_error_propagates(make_watch, failing_store):
    w = make_watch(settings_store=failing_store)
    with pytest.raises(SettingsError):
        step(w, Command.TOGGLE_ALARM)

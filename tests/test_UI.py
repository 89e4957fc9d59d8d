import asyncio

from casiotoy.renderer import Role, render
from casiotoy.shared import StandardMode, WatchModel
from casiotoy.UI import WatchFaceView, WatchUI


def run(app, *keys):
    """Press `keys` in a headless app, return the app afterwards."""

    async def main():
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)

    asyncio.run(main())
    return app


def test_keys_drive_the_watch(make_watch):
    w = make_watch()
    run(WatchUI(w, poll_interval=10.0), "m", "m", "m", "m", "s", "l")
    assert w.mode is StandardMode.STOPWATCH
    assert w.stopwatch.running
    assert w.light.on


def test_face_view_is_sized_to_the_model(make_watch):
    w = make_watch(WatchModel.MINIMAL)
    app = WatchUI(w, poll_interval=10.0)

    async def main():
        async with app.run_test() as pilot:
            view = app.query_one("#face", WatchFaceView)
            assert view.size == (30, 10)
            assert view.render().plain == render(w).toText().plain
            await pilot.press("q")

    asyncio.run(main())
    assert app.return_code == 0


def test_quit_exits_cleanly(make_watch):
    app = run(WatchUI(make_watch(), poll_interval=10.0), "q")
    assert app.return_code == 0


def test_escape_quits(make_watch):
    app = run(WatchUI(make_watch(), poll_interval=10.0), "escape")
    assert app.return_code == 0


def test_settings_failure_exits_with_error(make_watch, failing_store):
    w = make_watch(settings_store=failing_store)
    app = run(WatchUI(w, poll_interval=10.0), "a")
    assert app.return_code == 1
    assert failing_store.save_attempts == 1


def test_alarm_logged_once_per_minute(make_watch, clock, caplog):
    w = make_watch()
    w.toggle_alarm()
    clock.advance(60)
    app = WatchUI(w, poll_interval=10.0)

    async def main():
        async with app.run_test() as pilot:
            app.onPoll()
            app.onPoll()
            await pilot.pause()

    with caplog.at_level("INFO", logger="casiotoy.UI"):
        asyncio.run(main())
    fired = [r for r in caplog.records if "fired" in r.getMessage()]
    assert len(fired) == 1
    assert render(w).hasRole(Role.ALARM_INDICATOR)


def test_alarm_due_at_startup_is_logged_on_mount(make_watch, clock, caplog):
    w = make_watch()
    w.toggle_alarm()
    clock.advance(60)
    app = WatchUI(w, poll_interval=10.0)
    with caplog.at_level("INFO", logger="casiotoy.UI"):
        run(app)
    fired = [r for r in caplog.records if "fired" in r.getMessage()]
    assert len(fired) == 1
    assert app.last_alarm_minute == clock.now().replace(second=0, microsecond=0)

import logging
from datetime import datetime

from textual.app import App, ComposeResult, RenderResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import Footer

from . import renderer
from .shared import Command, AlarmFired
from .watch import Watch
from .persistent import SettingsError
from .control import KEY_COMMANDS, POLL_INTERVAL_S, StepResult, step

log = logging.getLogger(__name__)

COMMAND_DESCRIPTIONS = {
    Command.QUIT: 'Quit',
    Command.ADVANCE_MODE: 'Mode',
    Command.TOGGLE_RUN_STOP: 'Start/Stop',
    Command.RESET: 'Reset',
    Command.TOGGLE_LIGHT: 'Light',
    Command.TOGGLE_ALARM: 'Alarm',
}

class WatchFaceView(Widget):
    def __init__(self, wristwatch: Watch, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.wristwatch = wristwatch
        width, height = wristwatch.model.face_size
        self.styles.width = width
        self.styles.height = height

    def render(self) -> RenderResult:
        return renderer.render(self.wristwatch).toText()

class WatchUI(App):
    CSS = '''
    Screen {
        align: center middle;
    }
    '''
    BINDINGS = [
        Binding(
            key, f"command('{command.value}')", COMMAND_DESCRIPTIONS[command],
            show=(key != 'escape'), priority=True,
        )
        for key, command in KEY_COMMANDS.items()
    ]

    def __init__(self, wristwatch: Watch, poll_interval: float = POLL_INTERVAL_S) -> None:
        super().__init__()

        self.wristwatch = wristwatch
        self.poll_interval = poll_interval
        self.last_alarm_minute: datetime | None = None

        self.title = wristwatch.model.title

    def compose(self) -> ComposeResult:
        yield WatchFaceView(self.wristwatch, id='face')
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.handleStep(StepResult(alarm=self.wristwatch.tick()))
        self.set_interval(self.poll_interval, self.onPoll)

    def onPoll(self) -> None:
        self.runStep(None)

    def action_command(self, name: str) -> None:
        self.runStep(Command(name))

    def runStep(self, command: Command | None) -> None:
        try:
            result = step(self.wristwatch, command)
        except SettingsError as e:
            log.error(str(e))
            self.exit(return_code=1, message=str(e))
            return
        self.handleStep(result)

    def handleStep(self, result: StepResult) -> None:
        if result.quit:
            self.exit(return_code=0)
            return
        if result.alarm is not None:
            self.onAlarm(result.alarm)
        self.query_one('#face', WatchFaceView).refresh()

    def onAlarm(self, alarm: AlarmFired) -> None:
        # Nothing rings yet: log once per alarm minute.
        minute = alarm.at.replace(second=0, microsecond=0)
        if minute == self.last_alarm_minute:
            return
        self.last_alarm_minute = minute
        log.info(f'Alarm {alarm.alarm_time} fired at {alarm.at:%H:%M:%S}')

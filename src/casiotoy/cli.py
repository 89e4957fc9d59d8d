'''
casiotoy: a digital wristwatch in the terminal.

Examples:
    casiotoy                          # AE-1200 style, settings in ./casiotoy.json
    casiotoy -m f91w                  # the single-button F-91W
    casiotoy --settings ~/.casio.json
    casiotoy --no-persist             # keep settings in memory only
    casiotoy --frozen-at 2024-03-01T13:05:00
'''

import os
import typing as tp
import logging
from datetime import datetime

import dotenv
import typer
from textual.logging import TextualHandler

from .shared import WatchModel
from .watch import Watch
from .persistent import (
    DEFAULT_SETTINGS_PATH, JsonSettingsStore, MemorySettingsStore,
    SettingsError, SettingsStoreInterface,
)
from .clock_interface import ClockInterface
from .clock_system import SystemClock
from .clock_dummy import ClockDummy
from .UI import WatchUI

SETTINGS_ENV_VAR = 'CASIOTOY_SETTINGS'

log = logging.getLogger(__name__)

app = typer.Typer(
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)

def resolveSettingsPath(cli_path: str | None) -> str:
    '''
    `--settings` beats `$CASIOTOY_SETTINGS` (environment or .env) beats the default.
    '''
    if cli_path:
        return cli_path
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    return os.getenv(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_PATH

def parseModel(value: str) -> WatchModel:
    try:
        return WatchModel.fromName(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))

def parseFrozenAt(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f'Not an ISO timestamp: {value!r}')

def parseLogLevel(value: str) -> int:
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f'Not a logging level: {value!r}')
    return level

@app.command()
def main(
    model: str = typer.Option("standard", "-m", "--model", help="standard (AE-1200) | minimal (F-91W)"),
    settings: tp.Optional[str] = typer.Option(None, "-s", "--settings", help=f"Settings JSON path. Default: ${SETTINGS_ENV_VAR} or {DEFAULT_SETTINGS_PATH}"),
    no_persist: bool = typer.Option(False, "--no-persist", help="Keep settings in memory; never touch the disk."),
    frozen_at: tp.Optional[str] = typer.Option(None, "--frozen-at", help="Freeze the clock at this ISO timestamp."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level, shown in the Textual devtools console."),
) -> None:
    logging.basicConfig(level=parseLogLevel(log_level), handlers=[TextualHandler()])

    watch_model = parseModel(model)
    frozen = parseFrozenAt(frozen_at)

    store: SettingsStoreInterface
    if no_persist:
        store = MemorySettingsStore()
    else:
        store = JsonSettingsStore(resolveSettingsPath(settings))
    clock: ClockInterface = SystemClock() if frozen is None else ClockDummy(frozen)

    try:
        wristwatch = Watch(watch_model, store, clock)
    except SettingsError as e:
        typer.echo(f'Error: {e}', err=True)
        raise typer.Exit(code=1)

    ui = WatchUI(wristwatch)
    ui.run()
    raise typer.Exit(code=ui.return_code or 0)

import logging

import pytest
import typer
from typer.testing import CliRunner

from casiotoy.cli import app, parseFrozenAt, parseLogLevel, parseModel, resolveSettingsPath
from casiotoy.shared import WatchModel

runner = CliRunner()


class TestSettingsPath:
    def test_flag_wins(self, monkeypatch):
        monkeypatch.setenv("CASIOTOY_SETTINGS", "/from/env.json")
        assert resolveSettingsPath("/from/flag.json") == "/from/flag.json"

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CASIOTOY_SETTINGS", "/from/env.json")
        assert resolveSettingsPath(None) == "/from/env.json"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        # set first so teardown removes whatever .env loading puts there
        monkeypatch.setenv("CASIOTOY_SETTINGS", "placeholder")
        monkeypatch.delenv("CASIOTOY_SETTINGS")
        (tmp_path / ".env").write_text("CASIOTOY_SETTINGS=dotenv.json\n", encoding="utf-8")
        assert resolveSettingsPath(None) == "dotenv.json"

    def test_default(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CASIOTOY_SETTINGS", raising=False)
        assert resolveSettingsPath(None) == "casiotoy.json"


@pytest.mark.parametrize("name, model", [
    ("standard", WatchModel.STANDARD),
    ("AE1200", WatchModel.STANDARD),
    ("minimal", WatchModel.MINIMAL),
    ("f91w", WatchModel.MINIMAL),
    ("F-91W", WatchModel.MINIMAL),
])
def test_model_names(name, model):
    assert parseModel(name) is model


def test_unknown_model():
    with pytest.raises(typer.BadParameter):
        parseModel("g-shock")


def test_frozen_at():
    assert parseFrozenAt(None) is None
    assert parseFrozenAt("2024-03-01T13:05:00").hour == 13
    with pytest.raises(typer.BadParameter):
        parseFrozenAt("teatime")


def test_corrupt_settings_exit_before_ui(tmp_path):
    path = tmp_path / "casiotoy.json"
    path.write_text("{oops", encoding="utf-8")
    result = runner.invoke(app, ["--settings", str(path)])
    assert result.exit_code == 1
    assert path.read_text(encoding="utf-8") == "{oops"


def test_bad_model_is_a_usage_error(tmp_path):
    result = runner.invoke(app, ["--model", "g-shock", "--no-persist"])
    assert result.exit_code == 2


@pytest.mark.parametrize("name, level", [
    ("WARNING", logging.WARNING),
    ("debug", logging.DEBUG),
    ("Info", logging.INFO),
    ("warn", logging.WARNING),
])
def test_log_levels(name, level):
    assert parseLogLevel(name) == level


@pytest.mark.parametrize("name", ["loud", "", "Level 5"])
def test_unknown_log_level(name):
    with pytest.raises(typer.BadParameter):
        parseLogLevel(name)


def test_bad_log_level_is_a_usage_error(tmp_path):
    result = runner.invoke(app, ["--log-level", "loud", "--no-persist"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)

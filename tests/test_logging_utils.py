import json

import pytest

from mapgen import logging_utils
from mapgen.logging_utils import get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging_utils.configure()


def test_key_value_format(capsys):
    logging_utils.configure(level="info", json_mode=False)
    get_logger("rooms").info(event="rooms generated", placed=3, skipped=None)
    line = capsys.readouterr().out.strip()
    assert line.startswith("level=info ts=")
    assert "event=rooms_generated" in line
    assert "placed=3" in line
    assert "logger=rooms" in line
    assert "skipped" not in line


def test_json_format(capsys):
    logging_utils.configure(level="info", json_mode=True)
    get_logger("rooms").warn(event="x", count=2)
    rec = json.loads(capsys.readouterr().out)
    assert rec["level"] == "warn"
    assert rec["logger"] == "rooms"
    assert rec["count"] == 2
    assert isinstance(rec["ts"], int)


def test_level_threshold(capsys):
    logging_utils.configure(level="warn", json_mode=False)
    log = get_logger("t")
    log.debug(event="a")
    log.info(event="b")
    assert capsys.readouterr().out == ""
    assert not log.is_enabled("info")
    assert log.is_enabled("error")


def test_errors_go_to_stderr(capsys):
    logging_utils.configure(level="info", json_mode=False)
    get_logger("t").error(event="boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=boom" in captured.err


def test_environment_configuration(monkeypatch, capsys):
    monkeypatch.setenv("MAPGEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("MAPGEN_LOG_JSON", "yes")
    logging_utils.configure()
    get_logger("t").debug(event="d")
    assert json.loads(capsys.readouterr().out)["event"] == "d"


def test_loggers_are_cached():
    assert get_logger("same") is get_logger("same")
    assert get_logger("same") is not get_logger("other")

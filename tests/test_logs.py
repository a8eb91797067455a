from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from peril.logs import LOGS_FILE, LogWriteError, write_log
from peril.routing import GameLog


def _log(message="hello", username="alice"):
    return GameLog(
        current_time=datetime(2024, 1, 2, 3, 4, 5, 999000, tzinfo=timezone.utc),
        message=message,
        username=username,
    )


@patch("peril.logs.time.sleep")
def test_write_log_line_format(sleep, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = write_log(_log())
    assert result is None
    content = (tmp_path / LOGS_FILE).read_text(encoding="utf-8")
    assert content == "2024-01-02T03:04:05Z alice: hello\n"
    assert sleep.call_count == 1


@patch("peril.logs.time.sleep")
def test_write_log_appends(sleep, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = write_log(_log("first", "a"))
    second = write_log(_log("second", "b"))
    assert first is None and second is None
    lines = (tmp_path / LOGS_FILE).read_text(encoding="utf-8").splitlines()
    assert lines == [
        "2024-01-02T03:04:05Z a: first",
        "2024-01-02T03:04:05Z b: second",
    ]
    assert sleep.call_count == 2


@patch("peril.logs.time.sleep")
def test_write_log_unopenable_file(sleep, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / LOGS_FILE).mkdir()
    with pytest.raises(LogWriteError, match="could not open logs file"):
        write_log(_log())
from datetime import datetime, timedelta, timezone

import pytest

from peril.routing import GameLog, PlayingState


@pytest.mark.parametrize("paused", [True, False])
def test_playing_state_round_trip(paused):
    state = PlayingState(is_paused=paused)
    assert PlayingState.from_dict(state.to_dict()) == state


def test_playing_state_wire_key():
    assert PlayingState(is_paused=True).to_dict() == {"IsPaused": True}


def test_playing_state_missing_key_defaults_to_running():
    assert PlayingState.from_dict({}).is_paused is False


def test_game_log_round_trip_utc():
    log = GameLog(
        current_time=datetime(2024, 3, 4, 5, 6, 7, 250000, tzinfo=timezone.utc),
        message="hello",
        username="alice",
    )
    assert GameLog.from_dict(log.to_dict()) == log


def test_game_log_round_trip_with_offset():
    tz = timezone(timedelta(hours=-5, minutes=-30))
    log = GameLog(current_time=datetime(2020, 1, 1, 12, 0, 0, tzinfo=tz), message="m", username="u")
    back = GameLog.from_dict(log.to_dict())
    assert back.current_time == log.current_time
    assert back.current_time.utcoffset() == tz.utcoffset(None)


def test_game_log_utc_uses_z_suffix():
    log = GameLog(current_time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    assert log.to_dict()["CurrentTime"] == "2024-01-02T03:04:05Z"


def test_game_log_naive_time_taken_as_utc():
    log = GameLog(current_time=datetime(2024, 1, 2, 3, 4, 5))
    assert log.current_time.tzinfo == timezone.utc


def test_game_log_parses_nanoseconds():
    log = GameLog.from_dict(
        {"CurrentTime": "2024-05-06T07:08:09.123456789Z", "Message": "x", "Username": "y"}
    )
    assert log.current_time.microsecond == 123456
    assert log.username == "y"
    assert log.message == "x"


def test_game_log_rejects_bad_time():
    with pytest.raises(ValueError):
        GameLog.from_dict({"CurrentTime": "yesterday"})
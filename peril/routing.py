"""Exchange names, routing keys and the messages exchanged between players."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

ARMY_MOVES_PREFIX = "army_moves"
WAR_RECOGNITIONS_PREFIX = "war"
PAUSE_KEY = "pause"
GAME_LOG_SLUG = "game_logs"

EXCHANGE_PERIL_DIRECT = "peril_direct"
EXCHANGE_PERIL_TOPIC = "peril_topic"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


def _format_time(moment: datetime) -> str:
    """Format a timestamp as RFC 3339 with trailing fractional zeros trimmed."""
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, keeping at most microsecond precision."""
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6])
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


@dataclass
class PlayingState:
    """Whether the game is paused."""

    is_paused: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"IsPaused": self.is_paused}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayingState:
        return cls(is_paused=bool(data.get("IsPaused", False)))


@dataclass
class GameLog:
    """A log line sent by a player; naive times are taken as UTC."""

    current_time: datetime = field(default_factory=lambda: _ZERO_TIME)
    message: str = ""
    username: str = ""

    def __post_init__(self) -> None:
        if self.current_time.tzinfo is None:
            self.current_time = self.current_time.replace(tzinfo=timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "CurrentTime": _format_time(self.current_time),
            "Message": self.message,
            "Username": self.username,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameLog:
        raw_time = data.get("CurrentTime")
        current_time = _parse_time(raw_time) if raw_time else _ZERO_TIME
        return cls(
            current_time=current_time,
            message=data.get("Message", ""),
            username=data.get("Username", ""),
        )
"""Appending received game logs to disk."""

from __future__ import annotations

import logging
import time

from .routing import GameLog

LOGS_FILE = "game.log"
WRITE_TO_DISK_SLEEP = 1.0

logger = logging.getLogger(__name__)


class LogWriteError(OSError):
    """The log file could not be opened or written."""


def _rfc3339_seconds(gamelog: GameLog) -> str:
    text = gamelog.current_time.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def write_log(gamelog: GameLog) -> None:
    """Append one game log line to the logs file, after a deliberate delay."""
    logger.info("received game log...")
    time.sleep(WRITE_TO_DISK_SLEEP)

    line = f"{_rfc3339_seconds(gamelog)} {gamelog.username}: {gamelog.message}\n"
    try:
        handle = open(LOGS_FILE, "a", encoding="utf-8")
    except OSError as exc:
        raise LogWriteError(f"could not open logs file: {exc}") from exc
    with handle:
        try:
            handle.write(line)
        except OSError as exc:
            raise LogWriteError(f"could not write to logs file: {exc}") from exc
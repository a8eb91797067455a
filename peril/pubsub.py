"""Publishing JSON messages and declaring bound queues on a message broker."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

import pika


class SimpleQueueType(IntEnum):
    DURABLE = 0
    TRANSIENT = 1


def _encode(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def publish_json(channel: Any, exchange: str, key: str, val: Any) -> None:
    """Serialise a value as compact JSON and publish it."""
    body = json.dumps(val, default=_encode, separators=(",", ":")).encode("utf-8")
    channel.basic_publish(
        exchange=exchange,
        routing_key=key,
        body=body,
        properties=pika.BasicProperties(content_type="application/json"),
    )


def declare_and_bind(
    conn: Any, exchange: str, queue_name: str, key: str, queue_type: SimpleQueueType
) -> tuple[Any, Any]:
    """Open a channel, declare a queue on it and bind it to the exchange."""
    channel = conn.channel()
    durable = queue_type == SimpleQueueType.DURABLE
    queue = channel.queue_declare(
        queue=queue_name,
        durable=durable,
        exclusive=not durable,
        auto_delete=not durable,
    )
    channel.queue_bind(queue=queue_name, exchange=exchange, routing_key=key)
    return channel, queue